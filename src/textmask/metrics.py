"""Prometheus metrics definitions for textmask."""

from __future__ import annotations

from prometheus_client import Counter

FORMAT_PASSES = Counter(
    "textmask_format_passes_total",
    "Number of formatting passes by outcome",
    ["outcome"],
)

REJECTED_CHARACTERS = Counter(
    "textmask_rejected_characters_total",
    "Input characters dropped because they did not satisfy their placeholder slot",
    ["kind"],
)

__all__ = [
    "FORMAT_PASSES",
    "REJECTED_CHARACTERS",
]
