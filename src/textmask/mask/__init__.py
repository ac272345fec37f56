"""Mask formatting core and host wiring."""

from .placeholders import PlaceholderKind, sanitize
from .formatter import MaskFormatter, format_text, strip_prefix
from .field import InMemoryTextHost, MaskedTextField, TextHost

__all__ = [
    "InMemoryTextHost",
    "MaskFormatter",
    "MaskedTextField",
    "PlaceholderKind",
    "TextHost",
    "format_text",
    "sanitize",
    "strip_prefix",
]
