"""
Test suites package.

This repository intentionally keeps `testsuites` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - reuse of the UI framework from other test repositories
"""
