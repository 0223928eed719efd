"""
================================================================================
Selenium Capture
================================================================================

Screenshot and alert-text capture to timestamped files.

File names are ``<prefix><yyyyMMdd_HHmmssSSS>.<ext>`` under the directory
configured as ``capture.dir``. Two captures within the same millisecond get
the same name: screenshots overwrite, alert captures fail.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

import allure
from loguru import logger
from selenium.webdriver.common.alert import Alert
from selenium.webdriver.remote.webdriver import WebDriver

from .property_source import PropertySource


IMAGE_EXTENSION = ".jpg"
TEXT_EXTENSION = ".txt"


class CaptureError(Exception):
    """Raised when a capture cannot be taken or written."""
    pass


def format_timestamp(moment: datetime) -> str:
    """Format as yyyyMMdd_HHmmssSSS (millisecond precision)."""
    return moment.strftime("%Y%m%d_%H%M%S") + f"{moment.microsecond // 1000:03d}"


class SeleniumCapture:
    """
    Saves screenshots and alert messages for a driver.

    The output directory is read from the settings when the instance is
    built, not held at module level. ``create_output_dir`` is therefore an
    instance method, but it acts on a shared path: any number of instances
    for the same directory can call it, in any order.

    Usage:
        >>> capture = SeleniumCapture(driver, props)
        >>> capture.create_output_dir()
        >>> capture.prefix = "login_"
        >>> capture.screenshot()
        PosixPath('/tmp/out/login_20240102_030405678.jpg')
    """

    def __init__(
        self,
        driver: WebDriver,
        properties: PropertySource,
        clock: Callable[[], datetime] = datetime.now,
        attach_to_allure: bool = False,
    ):
        """
        Initialize capture service.

        Args:
            driver: Driver to capture from (borrowed, never quit here)
            properties: Settings source providing capture.dir
            clock: Source of local time for file names
            attach_to_allure: Also attach every capture to the Allure report
        """
        self._driver = driver
        self._output_dir = Path(properties.get_string("capture.dir"))
        self._clock = clock
        self.attach_to_allure = attach_to_allure
        self._prefix = ""

    @property
    def driver(self) -> WebDriver:
        return self._driver

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    @property
    def prefix(self) -> str:
        """File name prefix prepended to generated names."""
        return self._prefix

    @prefix.setter
    def prefix(self, value: str) -> None:
        self._prefix = value

    def create_output_dir(self) -> Path:
        """Create the output directory and its parents if missing."""
        self._output_dir.mkdir(parents=True, exist_ok=True)
        return self._output_dir

    def _generated_path(self, extension: str) -> Path:
        return self._output_dir / f"{self._prefix}{format_timestamp(self._clock())}{extension}"

    def screenshot(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Save a screenshot of the current window.

        Args:
            path: Exact output file. Generated under capture.dir when None.

        Returns:
            Path written

        Raises:
            CaptureError: Driver cannot take screenshots or write failed
        """
        path = Path(path) if path is not None else self._generated_path(IMAGE_EXTENSION)
        logger.debug(f"capture : {path}")

        take_screenshot = getattr(self._driver, "get_screenshot_as_png", None)
        if take_screenshot is None:
            raise CaptureError(
                f"Driver does not support screenshots: {type(self._driver).__name__}"
            )

        try:
            data = take_screenshot()
            path.write_bytes(data)
        except OSError as e:
            raise CaptureError(f"Failed to write screenshot {path}: {e}") from e

        if self.attach_to_allure:
            allure.attach(
                data,
                name=path.name,
                attachment_type=allure.attachment_type.PNG,
            )
        return path

    def screenshot_alert_text(self, alert: Alert) -> Path:
        """
        Save the text of an alert dialog.

        Never overwrites: an existing file at the generated path is an error.

        Returns:
            Path written

        Raises:
            CaptureError: File already exists or write failed
        """
        path = self._generated_path(TEXT_EXTENSION)
        logger.debug(f"capture : {path}")

        text = alert.text
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(text)
        except FileExistsError as e:
            raise CaptureError(f"Capture file already exists: {path}") from e
        except OSError as e:
            raise CaptureError(f"Failed to write alert text {path}: {e}") from e

        if self.attach_to_allure:
            allure.attach(
                text,
                name=path.name,
                attachment_type=allure.attachment_type.TEXT,
            )
        return path


__all__ = [
    "CaptureError",
    "SeleniumCapture",
    "format_timestamp",
]
