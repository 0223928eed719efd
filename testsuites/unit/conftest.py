"""
Unit test fixtures.

Unit tests never start a browser; drivers are replaced by fakes.
"""

import pytest


# Environment variables that would override settings under test
SETTING_ENV_VARS = [
    "DRIVER_URL_CHROME",
    "DRIVER_URL_IE",
    "DISPLAY_POSITION_X",
    "DISPLAY_POSITION_Y",
    "DISPLAY_SIZE_MAXIMIZE",
    "DISPLAY_SIZE_WIDTH",
    "DISPLAY_SIZE_HEIGHT",
    "WAIT_IMPLICIT_MSEC_PAGELOAD",
    "WAIT_IMPLICIT_MSEC_ELEMENT",
    "CAPTURE_DIR",
    "EXECUTE_BROWSER_IE",
    "EXECUTE_BROWSER_CHROME",
    "EXECUTE_BROWSER_FIREFOX",
    "SELENIUM_CONFIG",
]


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch):
    """Keep CI environment overrides out of unit tests."""
    for name in SETTING_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
