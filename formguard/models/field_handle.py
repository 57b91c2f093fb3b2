"""Per-field validation and change-tracking state machine."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Callable, NewType, Optional

from formguard.lib.errors import FieldDisposedError
from formguard.lib.validators import ValidationRule
from formguard.models.sources import FocusNode, TextController

if TYPE_CHECKING:
    from formguard.models.coordinator import FormCoordinator

logger = logging.getLogger(__name__)

__all__ = ["FieldId", "FieldHandle", "new_field_id"]

FieldId = NewType("FieldId", str)


def new_field_id() -> FieldId:
    """Issue a fresh identity; identities are never reused."""
    return FieldId(uuid.uuid4().hex)


class FieldHandle:
    """State of one validated input within a form.

    The handle tracks four flags that decide whether the field's error is
    visible (``is_focused``, ``is_touched``, ``is_error_hidden`` and
    ``has_error``) plus ``changed_from_initial`` for dirty tracking.

    The rendering layer drives the handle through :meth:`set_value`,
    :meth:`focus_gained` and :meth:`focus_lost` (or by mutating the bound
    :class:`TextController` / :class:`FocusNode`), and must call
    :meth:`dispose` exactly once when the input goes away.

    Attributes:
        id: Stable identity, compared by value
        name: Optional label used in diagnostics
        validator: Rule mapping the current text to an error message or None
        on_error: Called with the error (or None) whenever a visible-error
            determination is made
        on_changed: Called with the new text on every value change
    """

    def __init__(
        self,
        validator: Optional[ValidationRule] = None,
        initial_value: Optional[str] = None,
        *,
        controller: Optional[TextController] = None,
        focus_node: Optional[FocusNode] = None,
        on_error: Optional[Callable[[Optional[str]], None]] = None,
        on_changed: Optional[Callable[[str], None]] = None,
        name: Optional[str] = None,
    ) -> None:
        """Initialize the handle.

        Args:
            validator: Validation rule; without one the field is never invalid
            initial_value: Seed text for a handle-owned controller
            controller: Externally owned text source to observe instead
            focus_node: Externally owned focus source to observe
            on_error: Error observer callback
            on_changed: Per-field value change callback
            name: Label for logs and error messages

        Raises:
            ValueError: If both ``controller`` and ``initial_value`` are given
        """
        if controller is not None and initial_value is not None:
            raise ValueError("Pass either controller or initial_value, not both")

        self.id = new_field_id()
        self.name = name
        self.validator = validator
        self.on_error = on_error
        self.on_changed = on_changed

        self._owns_controller = controller is None
        if controller is None:
            controller = TextController(initial_value or "")
        self._controller = controller
        self._owns_focus_node = focus_node is None
        self._focus_node = focus_node if focus_node is not None else FocusNode()

        # Captured once; changed_from_initial is measured against it
        self._initial_value = self._controller.text

        self.has_error = False
        self.error_message = ""
        self.is_focused = self._focus_node.has_focus
        self.is_touched = False
        self.is_error_hidden = False
        self.changed_from_initial = False

        self._coordinator: Optional["FormCoordinator"] = None
        self._disposed = False
        self._syncing = False

        self._controller.add_listener(self._handle_text_change)
        self._focus_node.add_listener(self._handle_focus_change)

    # Read-only views

    @property
    def label(self) -> str:
        return self.name or self.id[:8]

    @property
    def current_value(self) -> str:
        return self._controller.text

    @property
    def initial_value(self) -> str:
        return self._initial_value

    @property
    def controller(self) -> TextController:
        return self._controller

    @property
    def focus_node(self) -> FocusNode:
        return self._focus_node

    @property
    def coordinator(self) -> Optional["FormCoordinator"]:
        return self._coordinator

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def should_show_error(self) -> bool:
        """Whether the rendering layer should display ``error_message``."""
        return (
            self.has_error
            and self.is_touched
            and not self.is_error_hidden
            and not self.is_focused
        )

    @property
    def _hide_error_on_focus(self) -> bool:
        if self._coordinator is None:
            return False
        return self._coordinator.hide_error_on_focus

    # Lifecycle

    def attach(self, coordinator: "FormCoordinator") -> None:
        """Register with ``coordinator``.

        Attaching again to the same coordinator re-registers, which is a
        no-op for a live member. Attaching to a different coordinator
        leaves the current one first.
        """
        if self._disposed:
            raise FieldDisposedError(self.id, "attach", self.name)
        coordinator.register(self)

    def detach(self) -> None:
        """Unregister from the current coordinator, if any."""
        if self._coordinator is None:
            return
        self._coordinator.unregister(self)

    def dispose(self) -> None:
        """Detach, drop every listener and release handle-owned sources.

        Raises:
            FieldDisposedError: If the handle was already disposed
        """
        if self._disposed:
            raise FieldDisposedError(self.id, "dispose", self.name)
        self._disposed = True
        try:
            self.detach()
        finally:
            self._release_controller()
            self._release_focus_node()
        logger.debug("Disposed field %s", self.label)

    # Source binding

    def bind_controller(self, controller: Optional[TextController]) -> None:
        """Observe ``controller`` instead of the current text source.

        ``None`` switches back to a handle-owned controller seeded with the
        current text. The change flag is recomputed against the new text
        without emitting change notifications.
        """
        if self._disposed:
            raise FieldDisposedError(self.id, "bind a controller to", self.name)
        if controller is self._controller:
            return
        text = self._controller.text
        self._release_controller()
        if controller is None:
            self._controller = TextController(text)
            self._owns_controller = True
        else:
            self._controller = controller
            self._owns_controller = False
        self._controller.add_listener(self._handle_text_change)
        self.changed_from_initial = self._controller.text != self._initial_value

    def bind_focus_node(self, focus_node: Optional[FocusNode]) -> None:
        """Observe ``focus_node`` instead of the current focus source.

        ``None`` switches back to a handle-owned node. Focus state is
        resynchronised with the new node.
        """
        if self._disposed:
            raise FieldDisposedError(self.id, "bind a focus node to", self.name)
        if focus_node is self._focus_node:
            return
        self._release_focus_node()
        if focus_node is None:
            self._focus_node = FocusNode()
            self._owns_focus_node = True
        else:
            self._focus_node = focus_node
            self._owns_focus_node = False
        self._focus_node.add_listener(self._handle_focus_change)
        if self._focus_node.has_focus != self.is_focused:
            self._handle_focus_change()

    def _release_controller(self) -> None:
        if not self._controller.is_disposed:
            self._controller.remove_listener(self._handle_text_change)
            if self._owns_controller:
                self._controller.dispose()

    def _release_focus_node(self) -> None:
        if not self._focus_node.is_disposed:
            self._focus_node.remove_listener(self._handle_focus_change)
            if self._owns_focus_node:
                self._focus_node.dispose()

    def _handle_text_change(self) -> None:
        if self._syncing:
            return
        self.on_value_changed(self._controller.text)

    def _handle_focus_change(self) -> None:
        if self._focus_node.has_focus:
            self.on_focus_gained()
        else:
            self.on_focus_lost()

    # Rendering-layer entry points

    def set_value(self, value: str) -> None:
        """Apply new text coming from the input."""
        if self._controller.text != value:
            # The controller listener delivers the change
            self._controller.text = value
        else:
            self.on_value_changed(value)

    def focus_gained(self) -> None:
        if self._focus_node.has_focus:
            self.on_focus_gained()
        else:
            self._focus_node.request_focus()

    def focus_lost(self) -> None:
        if self._focus_node.has_focus:
            self._focus_node.unfocus()
        else:
            self.on_focus_lost()

    # State transitions

    def on_focus_gained(self) -> None:
        self.is_focused = True
        self.is_error_hidden = self._hide_error_on_focus

    def on_focus_lost(self) -> None:
        self.is_focused = False
        self.is_error_hidden = False
        self.validate()

    def on_value_changed(self, new_value: str) -> None:
        """Record a value mutation and report it to the form.

        ``is_touched`` latches on the first input that is not blank and is
        never reset for the life of the field.
        """
        if self._controller.text != new_value:
            self._syncing = True
            try:
                self._controller.text = new_value
            finally:
                self._syncing = False

        if self.on_changed is not None:
            self.on_changed(new_value)
        if self._coordinator is not None:
            self._coordinator.field_did_change()

        self.changed_from_initial = new_value != self._initial_value
        if not self.is_touched:
            self.is_touched = bool(new_value.strip())

    def validate(self, force_show_error: bool = False) -> Optional[str]:
        """Run the validator against the current text.

        Args:
            force_show_error: Clear focus and hidden state and mark the field
                touched so any error becomes visible, e.g. on submit

        Returns:
            The validator's error message, or None
        """
        if self.validator is None:
            self.has_error = False
            self.error_message = ""
            return None

        error = self.validator(self._controller.text)
        self.has_error = error is not None
        # An empty string from the validator still counts as an error
        self.error_message = error if error is not None else ""

        if force_show_error:
            self.is_error_hidden = False
            self.is_focused = False
            self.is_touched = True

        if self.on_error is not None and (
            force_show_error or (not self.is_focused and self.is_touched)
        ):
            self.on_error(error)

        return error

    def __repr__(self) -> str:
        return (
            f"FieldHandle(label={self.label!r}, value={self.current_value!r}, "
            f"has_error={self.has_error}, touched={self.is_touched}, "
            f"focused={self.is_focused})"
        )
