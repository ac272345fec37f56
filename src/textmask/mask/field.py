"""Composition-based wiring between a text-input host and a MaskFormatter."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol

from textmask.errors import FieldDetachedError
from textmask.mask.formatter import MaskFormatter

logger = logging.getLogger(__name__)

TextListener = Callable[[str], None]


class TextHost(Protocol):
    """Minimal surface a text-input widget exposes to the mask field."""

    @property
    def text(self) -> str:
        """Return the text currently displayed."""

    def set_text(self, value: str, *, notify: bool = True) -> None:
        """Replace the displayed text, optionally notifying listeners."""

    def add_listener(self, listener: TextListener) -> None:
        """Register a callback invoked with the new text after each change."""

    def remove_listener(self, listener: TextListener) -> None:
        """Deregister a callback added with ``add_listener``."""


class InMemoryTextHost:
    """Plain text holder that notifies listeners on change."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._listeners: List[TextListener] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def set_text(self, value: str, *, notify: bool = True) -> None:
        self._text = value
        if notify:
            for listener in list(self._listeners):
                listener(value)

    def type_text(self, value: str) -> None:
        """Append ``value`` one character at a time as a user would type it."""

        for char in value:
            self.set_text(self._text + char)

    def add_listener(self, listener: TextListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: TextListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            logger.debug("Listener was not registered on host")


class MaskedTextField:
    """Keep a host's text formatted against a mask.

    ``attach()`` subscribes to the host's change notifications and reformats
    whatever text is already present; ``detach()`` undoes the subscription.
    The field also works as a context manager scoping the two calls. Changing
    the pattern or prefix reformats the current text immediately, and
    write-backs never trigger another formatting pass.
    """

    def __init__(self, host: TextHost, formatter: Optional[MaskFormatter] = None) -> None:
        self._host = host
        self._formatter = formatter or MaskFormatter.from_settings()
        self._attached = False
        self._formatting = False

    @property
    def host(self) -> TextHost:
        return self._host

    @property
    def formatter(self) -> MaskFormatter:
        return self._formatter

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def text(self) -> str:
        return self._host.text

    @property
    def pattern(self) -> str:
        return self._formatter.pattern

    @pattern.setter
    def pattern(self, value: str) -> None:
        self._formatter.set_pattern(value)
        self._reformat_if_attached()

    @property
    def prefix(self) -> str:
        return self._formatter.prefix

    @prefix.setter
    def prefix(self, value: str) -> None:
        self._formatter.set_prefix(value)
        self._reformat_if_attached()

    @property
    def max_length(self) -> int:
        return self._formatter.max_length

    def attach(self) -> None:
        if self._attached:
            logger.debug("Masked field already attached")
            return
        self._host.add_listener(self._on_text_changed)
        self._attached = True
        self.reformat()

    def detach(self) -> None:
        if not self._attached:
            return
        self._host.remove_listener(self._on_text_changed)
        self._attached = False

    def set_text(self, value: str) -> str:
        """Write ``value`` into the host programmatically and format it."""

        if not self._attached:
            raise FieldDetachedError("Masked field must be attached before setting text")
        self._host.set_text(value, notify=False)
        return self.reformat()

    def reformat(self) -> str:
        """Format the host's current text and write the result back."""

        if self._formatting:
            return self._host.text
        self._formatting = True
        try:
            formatted = self._formatter.format(self._host.text)
            if formatted != self._host.text:
                self._host.set_text(formatted, notify=False)
        finally:
            self._formatting = False
        return formatted

    def _reformat_if_attached(self) -> None:
        if self._attached:
            self.reformat()

    def _on_text_changed(self, _text: str) -> None:
        self.reformat()

    def __enter__(self) -> "MaskedTextField":
        self.attach()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.detach()


__all__ = ["InMemoryTextHost", "MaskedTextField", "TextHost", "TextListener"]
