"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global settings loaded from environment variables or .env files."""

    default_pattern: str = Field(
        default="",
        description="Mask applied when no pattern is given explicitly.",
    )
    default_prefix: str = Field(
        default="",
        description="Prefix applied when no prefix is given explicitly.",
    )
    log_level: str = Field(default="WARNING", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    log_raw_input: bool = Field(
        default=False,
        description="Include raw and formatted text in log records when true.",
    )
    metrics_enabled: bool = Field(
        default=True,
        description="Record Prometheus counters for formatting passes when true.",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.rstrip("\r\n")
                if not line.strip() or line.lstrip().startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = _unquote(raw_value.strip())
    except FileNotFoundError:
        return {}
    return payload


def _unquote(value: str) -> str:
    # Prefixes such as "+55 " need quoting to keep their trailing space.
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        value = os.environ.get(key)
        if value is None:
            value = file_values.get(key)
        return value

    payload: dict[str, object] = {}
    if (pattern := _env("TEXTMASK_DEFAULT_PATTERN")) is not None:
        payload["default_pattern"] = pattern
    if (prefix := _env("TEXTMASK_DEFAULT_PREFIX")) is not None:
        payload["default_prefix"] = prefix
    if (log_level := _env("TEXTMASK_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("TEXTMASK_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (log_raw_input := _env("TEXTMASK_LOG_RAW_INPUT")):
        payload["log_raw_input"] = _coerce_bool(log_raw_input)
    if (metrics_enabled := _env("TEXTMASK_METRICS_ENABLED")):
        payload["metrics_enabled"] = _coerce_bool(metrics_enabled)
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
