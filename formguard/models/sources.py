"""Observable value and focus sources a field can bind to.

A field either creates its own sources or observes ones supplied by the
rendering layer. Subscriptions are explicit so that rebinding a field to a
different source can drop the old listener before adding the new one.
"""

from __future__ import annotations

from typing import Callable

from formguard.lib.errors import SourceDisposedError

__all__ = ["Listener", "Listenable", "TextController", "FocusNode"]

Listener = Callable[[], None]


class Listenable:
    """Ordered set of zero-argument listeners."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def _ensure_live(self) -> None:
        if self._disposed:
            raise SourceDisposedError(type(self).__name__)

    def add_listener(self, listener: Listener) -> None:
        """Subscribe ``listener``. Adding the same listener twice is a no-op."""
        self._ensure_live()
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unsubscribe ``listener``.

        Raises:
            ValueError: If ``listener`` is not subscribed
        """
        self._listeners.remove(listener)

    def notify_listeners(self) -> None:
        self._ensure_live()
        # Listeners may unsubscribe themselves while being notified
        for listener in list(self._listeners):
            listener()

    def dispose(self) -> None:
        """Drop all listeners; the source may not be used afterwards."""
        self._listeners.clear()
        self._disposed = True


class TextController(Listenable):
    """Holds the text of an input and notifies listeners when it changes."""

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._ensure_live()
        if value == self._text:
            return
        self._text = value
        self.notify_listeners()

    def clear(self) -> None:
        self.text = ""

    def __repr__(self) -> str:
        return f"TextController(text={self._text!r})"


class FocusNode(Listenable):
    """Tracks whether an input holds focus; notifies on transitions only."""

    def __init__(self) -> None:
        super().__init__()
        self._has_focus = False

    @property
    def has_focus(self) -> bool:
        return self._has_focus

    def request_focus(self) -> None:
        self._set_focus(True)

    def unfocus(self) -> None:
        self._set_focus(False)

    def _set_focus(self, value: bool) -> None:
        self._ensure_live()
        if value == self._has_focus:
            return
        self._has_focus = value
        self.notify_listeners()

    def __repr__(self) -> str:
        return f"FocusNode(has_focus={self._has_focus})"
