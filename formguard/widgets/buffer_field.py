"""prompt_toolkit binding: drive a FieldHandle from a Buffer."""

from __future__ import annotations

from prompt_toolkit.buffer import Buffer

from formguard.lib.errors import FieldDisposedError
from formguard.models import FieldHandle


class BufferField:
    """Connects a prompt_toolkit :class:`Buffer` to a :class:`FieldHandle`.

    Text edits in the buffer become value changes of the handle. Focus is
    owned by the application layout, so the application reports it with
    :meth:`update_focus` whenever the focused window changes.

    The buffer is the source of truth for the text: binding a buffer whose
    text differs from the handle's value applies that text as a change.
    """

    def __init__(self, handle: FieldHandle, buffer: Buffer | None = None) -> None:
        self.handle = handle
        self._buffer: Buffer | None = None
        if buffer is None:
            buffer = Buffer(name=handle.name or "")
            buffer.text = handle.current_value
        self.rebind(buffer)

    @property
    def buffer(self) -> Buffer:
        """The bound buffer.

        Raises:
            FieldDisposedError: If the binding was disposed
        """
        if self._buffer is None:
            raise FieldDisposedError(
                self.handle.id, "read the buffer of", self.handle.name
            )
        return self._buffer

    def rebind(self, buffer: Buffer) -> None:
        """Observe ``buffer``, dropping the subscription to the previous one."""
        if buffer is self._buffer:
            return
        if self._buffer is not None:
            self._buffer.on_text_changed.remove_handler(self._handle_text_changed)
        self._buffer = buffer
        buffer.on_text_changed.add_handler(self._handle_text_changed)
        if buffer.text != self.handle.current_value:
            self.handle.set_value(buffer.text)

    def _handle_text_changed(self, buffer: Buffer) -> None:
        self.handle.set_value(buffer.text)

    def update_focus(self, has_focus: bool) -> None:
        """Report the buffer's focus; only transitions reach the handle."""
        if has_focus and not self.handle.is_focused:
            self.handle.focus_gained()
        elif not has_focus and self.handle.focus_node.has_focus:
            self.handle.focus_lost()

    @property
    def error_text(self) -> str:
        """Error text to render under the input, empty when hidden."""
        if self.handle.should_show_error:
            return self.handle.error_message
        return ""

    @property
    def style(self) -> str:
        """Style class for the input window, matching the form stylesheet."""
        if self.handle.should_show_error:
            return "class:field-input.invalid"
        if self.handle.is_focused:
            return "class:field-input.focused"
        return "class:field-input"

    def dispose(self) -> None:
        """Unsubscribe from the buffer and dispose the handle."""
        if self._buffer is not None:
            self._buffer.on_text_changed.remove_handler(self._handle_text_changed)
            self._buffer = None
        self.handle.dispose()
