"""
Test Suite for cents

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: Tests that read the process environment

Test Categories:
- Money construction, parsing and formatting
- Money arithmetic, rounding and error handling
- Integer cents helpers
- Configuration and logging setup
"""
