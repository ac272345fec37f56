"""Pydantic models shared by the formatter and the CLI."""

from textmask.models.mask import FormatOutcome, MaskSpec, SlotDescription, load_mask_spec

__all__ = [
    "FormatOutcome",
    "MaskSpec",
    "SlotDescription",
    "load_mask_spec",
]
