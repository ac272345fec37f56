"""Pattern-driven text formatter."""

from __future__ import annotations

import dataclasses
import logging
from collections import Counter
from typing import List, Optional

from textmask import metrics
from textmask.config import Settings, get_settings
from textmask.mask.placeholders import PlaceholderKind, sanitize
from textmask.models.mask import MaskSpec, SlotDescription

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class ScanResult:
    text: str
    outcome: str
    rejected: Counter = dataclasses.field(default_factory=Counter)


def strip_prefix(raw_input: str, prefix: str) -> str:
    """Remove a literal leading ``prefix`` from ``raw_input`` when present."""

    if not prefix or not raw_input.startswith(prefix):
        return raw_input
    return raw_input[len(prefix):]


def scan(pattern: str, prefix: str, raw_input: str) -> ScanResult:
    """Run one formatting pass and report what happened along the way.

    The pattern and the sanitized candidate are walked with independent
    cursors. A placeholder slot consumes exactly one candidate character
    whether or not it is accepted; a rejected character is dropped and the
    slot waits for the next one. Literal slots are emitted without touching
    the candidate.
    """

    if not pattern:
        return ScanResult(text=raw_input, outcome="passthrough")

    candidate = sanitize(strip_prefix(raw_input, prefix))
    if not candidate:
        return ScanResult(text="", outcome="empty")

    rejected: Counter = Counter()
    output: List[str] = []
    pattern_index = candidate_index = 0
    while pattern_index < len(pattern) and candidate_index < len(candidate):
        slot = pattern[pattern_index]
        kind = PlaceholderKind.from_symbol(slot)
        if kind is None:
            output.append(slot)
            pattern_index += 1
            continue

        accepted = kind.accept(candidate[candidate_index])
        if accepted is None:
            rejected[kind] += 1
        else:
            output.append(accepted)
            pattern_index += 1
        candidate_index += 1

    if not output:
        return ScanResult(text="", outcome="empty", rejected=rejected)

    text = prefix + "".join(output)
    max_length = len(pattern) + len(prefix)
    if len(text) > max_length:
        text = text[:max_length]
    return ScanResult(text=text, outcome="formatted", rejected=rejected)


def format_text(pattern: str, prefix: str, raw_input: str) -> str:
    """Format ``raw_input`` against ``pattern`` and prepend ``prefix``."""

    return scan(pattern, prefix, raw_input).text


def describe_pattern(pattern: str) -> List[SlotDescription]:
    slots: List[SlotDescription] = []
    for index, symbol in enumerate(pattern):
        kind = PlaceholderKind.from_symbol(symbol)
        slots.append(
            SlotDescription(
                index=index,
                symbol=symbol,
                kind=kind.name.lower() if kind is not None else None,
            )
        )
    return slots


class MaskFormatter:
    """Holds the active pattern and prefix and formats text against them."""

    def __init__(
        self,
        pattern: str = "",
        prefix: str = "",
        *,
        record_metrics: bool = True,
    ) -> None:
        self._pattern = pattern
        self._prefix = prefix
        self._record_metrics = record_metrics

    @classmethod
    def from_spec(cls, spec: MaskSpec, *, record_metrics: bool = True) -> "MaskFormatter":
        return cls(spec.pattern, spec.prefix, record_metrics=record_metrics)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "MaskFormatter":
        """Build a formatter from the configured default pattern and prefix."""

        settings = settings or get_settings()
        return cls(
            settings.default_pattern,
            settings.default_prefix,
            record_metrics=settings.metrics_enabled,
        )

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def max_length(self) -> int:
        return len(self._pattern) + len(self._prefix)

    @property
    def spec(self) -> MaskSpec:
        return MaskSpec(pattern=self._pattern, prefix=self._prefix)

    def set_pattern(self, pattern: str) -> None:
        """Replace the active mask; an empty pattern disables masking."""

        logger.debug("Mask pattern set pattern=%r", pattern)
        self._pattern = pattern

    def set_prefix(self, prefix: str) -> None:
        """Replace the active prefix; an empty prefix disables prefixing."""

        logger.debug("Mask prefix set prefix=%r", prefix)
        self._prefix = prefix

    def format(self, raw_input: str) -> str:
        result = scan(self._pattern, self._prefix, raw_input)
        logger.debug(
            "Formatted text outcome=%s rejected=%s",
            result.outcome,
            sum(result.rejected.values()),
            extra={"raw_input": raw_input, "formatted": result.text},
        )
        if self._record_metrics:
            metrics.FORMAT_PASSES.labels(outcome=result.outcome).inc()
            for kind, count in result.rejected.items():
                metrics.REJECTED_CHARACTERS.labels(kind=kind.name.lower()).inc(count)
        return result.text

    def describe(self) -> List[SlotDescription]:
        """Return one entry per pattern character, placeholder or literal."""

        return describe_pattern(self._pattern)

    def __repr__(self) -> str:
        return f"MaskFormatter(pattern={self._pattern!r}, prefix={self._prefix!r})"


__all__ = [
    "MaskFormatter",
    "ScanResult",
    "describe_pattern",
    "format_text",
    "scan",
    "strip_prefix",
]
