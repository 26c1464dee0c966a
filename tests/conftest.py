"""Shared test fixtures for the date picker test suite."""

import logging
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest

from termdatepicker.config import settings as settings_module
from termdatepicker.utils.logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep tests away from the user's config file and the global settings instance."""
    monkeypatch.setattr(settings_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing" / "config.yaml")
    monkeypatch.chdir(tmp_path)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


@pytest.fixture(autouse=True)
def restore_package_logger() -> Generator[None, None, None]:
    """Undo any handler setup so caplog sees package records."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def halloween() -> date:
    return date(2023, 10, 31)


@pytest.fixture
def thanksgiving() -> date:
    return date(2023, 11, 23)


@pytest.fixture
def xmas() -> date:
    return date(2023, 12, 25)
