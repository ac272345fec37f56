"""Mask configuration and formatting result models."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from textmask.errors import MaskSpecError


class MaskSpec(BaseModel):
    """Pattern and prefix pair describing one input mask."""

    pattern: str = Field(default="", description="Literal and placeholder characters.")
    prefix: str = Field(default="", description="Fixed text prepended to non-empty output.")

    model_config = ConfigDict(frozen=True)

    @property
    def max_length(self) -> int:
        return len(self.pattern) + len(self.prefix)


class SlotDescription(BaseModel):
    """One pattern character and the placeholder kind it maps to, if any."""

    index: int
    symbol: str
    kind: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_literal(self) -> bool:
        return self.kind is None


class FormatOutcome(BaseModel):
    """Formatting result as reported by the CLI."""

    raw_input: str
    output: str
    max_length: int


def load_mask_spec(path: Path) -> MaskSpec:
    """Read a JSON mask definition such as ``{"pattern": "#####-###"}``."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise MaskSpecError(f"Unable to read mask spec {path}: {exc}") from exc

    try:
        return MaskSpec.model_validate(payload)
    except ValidationError as exc:
        raise MaskSpecError(f"Invalid mask spec {path}: {exc}") from exc


__all__ = ["FormatOutcome", "MaskSpec", "SlotDescription", "load_mask_spec"]
