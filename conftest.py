"""
Repository-level pytest configuration.

Why this exists:
  - Make the repo root importable so `testsuites` and `uitest_tools` resolve
    without installation
  - Expose the shipped settings file to tests

Important:
  Driver binaries are not committed. Place them under
  uitest_tools/resources/drivers/ or point driver.url.* at local paths.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session")
def shipped_config_path(project_root: Path) -> Path:
    """Return the default Selenium settings file."""
    return project_root / "config" / "selenium.yaml"
