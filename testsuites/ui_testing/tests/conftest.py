"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for Selenium UI tests, providing fixtures for
driver management, capture, and test setup/teardown.

Key Features:
- One shared SeleniumContext per run, built from config/selenium.yaml
- Driver fixture parametrized over the enabled browsers
- Screenshot capture on failure

================================================================================
"""

from typing import Generator

import allure
import pytest
from loguru import logger
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver

from testsuites.ui_testing.framework.capture import CaptureError, SeleniumCapture
from testsuites.ui_testing.framework.driver_factory import BrowserKind, WebDriverFactory
from testsuites.ui_testing.framework.property_source import PropertySource
from testsuites.ui_testing.framework.selenium_test_base import SeleniumContext
from uitest_tools.common import init_logger


CONTEXT_KEY = pytest.StashKey[SeleniumContext]()


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config):
    """Build the run context once and register UI markers."""
    config.addinivalue_line(
        "markers", "ui: mark test as UI test"
    )

    properties = PropertySource.from_yaml()
    init_logger(properties)
    config.stash[CONTEXT_KEY] = SeleniumContext(properties)


def pytest_generate_tests(metafunc):
    """Run every driver-based test once per enabled browser."""
    if "browser_kind" in metafunc.fixturenames:
        browsers = metafunc.config.stash[CONTEXT_KEY].browsers
        metafunc.parametrize(
            "browser_kind",
            browsers,
            ids=[kind.name.lower() for kind in browsers],
            scope="session",
        )


# ================================================================================
# Driver Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def selenium_context(request) -> SeleniumContext:
    """
    Session-scoped run context.

    Holds the settings, the enabled browser list and the current driver.
    """
    return request.config.stash[CONTEXT_KEY]


@pytest.fixture(scope="session")
def driver(
    selenium_context: SeleniumContext,
    browser_kind: BrowserKind,
) -> Generator[WebDriver, None, None]:
    """
    Session-scoped driver for one browser kind.

    Created through WebDriverFactory, attached to the context, and quit
    when all tests for this browser have run.
    """
    factory = WebDriverFactory(selenium_context.properties)
    web_driver = factory.create(browser_kind)
    selenium_context.attach_driver(web_driver)
    yield web_driver
    selenium_context.detach_driver()
    web_driver.quit()
    logger.debug(f"Driver closed: {browser_kind.name}")


@pytest.fixture
def capture(driver: WebDriver, selenium_context: SeleniumContext) -> SeleniumCapture:
    """
    Capture service bound to the current driver, output directory created.
    """
    service = SeleniumCapture(driver, selenium_context.properties, attach_to_allure=True)
    service.create_output_dir()
    return service


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Saves a screenshot under capture.dir, prefixed with the test name, and
    attaches it to the Allure report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        web_driver = getattr(item, "funcargs", {}).get("driver")
        if web_driver is None:
            return

        properties = item.config.stash[CONTEXT_KEY].properties
        service = SeleniumCapture(web_driver, properties, attach_to_allure=True)
        service.prefix = f"{item.name}_"
        try:
            service.create_output_dir()
            with allure.step("Capture failure screenshot"):
                path = service.screenshot()
            logger.info(f"Failure screenshot saved: {path}")
        except (CaptureError, WebDriverException, OSError) as e:
            # Log but don't fail if screenshot capture fails
            logger.warning(f"Failed to capture screenshot on failure: {e}")
