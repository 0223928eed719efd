"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "unit: Tests that never start a browser"
    )
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Tags tests with 'unit' or 'ui' based on their directory so suites can
    be selected with -m.
    """
    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Selenium UI Test Framework",
        "=" * 60,
        "",
    ]
