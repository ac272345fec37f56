"""
Textmask input formatting package.

Formats raw text against patterns of literal characters and typed placeholder
slots, and wires the formatter into text-input hosts by composition.
"""

from textmask.mask import MaskFormatter, MaskedTextField, PlaceholderKind, format_text

__all__ = [
    "MaskFormatter",
    "MaskedTextField",
    "PlaceholderKind",
    "__version__",
    "format_text",
]

__version__ = "0.1.0"
