"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

from textmask.config import get_settings


def test_defaults():
    settings = get_settings()

    assert settings.default_pattern == ""
    assert settings.default_prefix == ""
    assert settings.log_level == "WARNING"
    assert settings.log_format == "plain"
    assert settings.log_raw_input is False
    assert settings.metrics_enabled is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TEXTMASK_DEFAULT_PATTERN", "###-###")
    monkeypatch.setenv("TEXTMASK_DEFAULT_PREFIX", "+1 ")
    monkeypatch.setenv("TEXTMASK_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TEXTMASK_LOG_FORMAT", "json")
    monkeypatch.setenv("TEXTMASK_LOG_RAW_INPUT", "yes")
    monkeypatch.setenv("TEXTMASK_METRICS_ENABLED", "0")

    settings = get_settings()

    assert settings.default_pattern == "###-###"
    assert settings.default_prefix == "+1 "
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.log_raw_input is True
    assert settings.metrics_enabled is False


def test_env_file_values_are_read_and_unquoted():
    Path(".env").write_text(
        '# mask defaults\nTEXTMASK_DEFAULT_PATTERN=#####-####\nTEXTMASK_DEFAULT_PREFIX="+55 "\n',
        encoding="utf-8",
    )

    settings = get_settings()

    assert settings.default_pattern == "#####-####"
    assert settings.default_prefix == "+55 "


def test_env_var_wins_over_env_file(monkeypatch):
    Path(".env").write_text("TEXTMASK_DEFAULT_PATTERN=###\n", encoding="utf-8")
    Path(".env.local").write_text("TEXTMASK_DEFAULT_PATTERN=####\n", encoding="utf-8")

    assert get_settings().default_pattern == "####"

    get_settings.cache_clear()
    monkeypatch.setenv("TEXTMASK_DEFAULT_PATTERN", "@@")
    assert get_settings().default_pattern == "@@"


def test_settings_are_cached():
    assert get_settings() is get_settings()
