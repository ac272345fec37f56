"""Shared pytest fixtures for the textmask test suite."""

from __future__ import annotations

from typing import Generator

import pytest

from textmask.config import get_settings
from textmask.mask import InMemoryTextHost, MaskFormatter

_ENV_KEYS = (
    "TEXTMASK_DEFAULT_PATTERN",
    "TEXTMASK_DEFAULT_PREFIX",
    "TEXTMASK_LOG_LEVEL",
    "TEXTMASK_LOG_FORMAT",
    "TEXTMASK_LOG_RAW_INPUT",
    "TEXTMASK_METRICS_ENABLED",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch) -> Generator[None, None, None]:
    """Keep each test away from the caller's env vars and .env files."""

    monkeypatch.chdir(tmp_path)
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def formatter() -> MaskFormatter:
    """Formatter with metrics recording switched off."""

    return MaskFormatter(record_metrics=False)


@pytest.fixture()
def host() -> InMemoryTextHost:
    return InMemoryTextHost()
