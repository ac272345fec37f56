"""Exceptions raised at the package's outer surfaces."""


class TextMaskError(Exception):
    """Base class for textmask errors."""


class MaskSpecError(TextMaskError, ValueError):
    """Raised when a mask definition cannot be loaded or validated."""


class FieldDetachedError(TextMaskError, RuntimeError):
    """Raised when text is pushed through a field that is not attached to its host."""
