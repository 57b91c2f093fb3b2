"""Textual input with coordinated validation and error display."""

from __future__ import annotations

from typing import Any, Callable

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, Label, Static

from formguard.lib.validators import all_of, required as required_rule
from formguard.models import FieldHandle, FormCoordinator
from formguard.settings import get_settings


class FormScope(Vertical):
    """Container that owns the coordinator for the inputs inside it.

    Inputs receive the coordinator explicitly::

        scope = FormScope(id="signin")
        with scope:
            yield ValidatedInput("email", form=scope.form, required=True)

    Posts :class:`FormScope.Changed` for every value change of any field.
    """

    DEFAULT_CSS = """
    FormScope {
        height: auto;
    }
    """

    class Changed(Message):
        """Posted when any field in the form changes."""

        def __init__(self, scope: "FormScope") -> None:
            super().__init__()
            self.scope = scope

    def __init__(
        self,
        *children: Any,
        hide_error_on_focus: bool | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the form scope.

        Args:
            children: Widgets to mount inside the scope
            hide_error_on_focus: Error policy; defaults to project settings
            name: Widget name
            id: Widget ID
            classes: CSS classes
        """
        super().__init__(*children, name=name, id=id, classes=classes)
        if hide_error_on_focus is None:
            hide_error_on_focus = get_settings().hide_error_on_focus
        self.form = FormCoordinator(
            hide_error_on_focus=hide_error_on_focus,
            on_changed=self._handle_field_changed,
            name=id or name,
        )

    def _handle_field_changed(self) -> None:
        self.post_message(self.Changed(self))

    def is_valid(self, force_show_error: bool = False) -> bool:
        return self.form.is_valid(force_show_error=force_show_error)

    @property
    def is_changed(self) -> bool:
        return self.form.is_changed


class ValidatedInput(Vertical):
    """Input field with label, coordinated validation and error display.

    The widget owns a :class:`FieldHandle`: it attaches the handle to the
    form on mount, forwards typing and focus changes to it, and disposes it
    on unmount. Error text is shown only while the handle says it should be,
    so errors appear after the user leaves the field or when the form is
    validated with ``force_show_error``.
    """

    DEFAULT_CSS = """
    ValidatedInput {
        height: auto;
        margin-bottom: 1;
    }

    ValidatedInput .field-label {
        color: $text;
        margin-bottom: 0;
    }

    ValidatedInput Input {
        width: 100%;
    }

    ValidatedInput Input.-invalid {
        border: tall $error;
    }

    ValidatedInput .error-text {
        color: $error;
        height: 1;
        margin-top: 0;
    }

    ValidatedInput .help-text {
        color: $text-muted;
        height: auto;
        margin-top: 0;
    }
    """

    class Changed(Message):
        """Posted when the input value changes."""

        def __init__(self, validated_input: "ValidatedInput", value: str) -> None:
            super().__init__()
            self.validated_input = validated_input
            self.value = value

    class Validated(Message):
        """Posted when the field reports a visible-error determination."""

        def __init__(
            self, validated_input: "ValidatedInput", error: str | None
        ) -> None:
            super().__init__()
            self.validated_input = validated_input
            self.error = error

        @property
        def is_valid(self) -> bool:
            return self.error is None

    def __init__(
        self,
        field_name: str,
        label: str | None = None,
        *,
        form: FormCoordinator | None = None,
        validator: Callable[[str], str | None] | None = None,
        required: bool = False,
        help_text: str = "",
        placeholder: str = "",
        default: str = "",
        password: bool = False,
        show_errors: bool | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the validated input.

        Args:
            field_name: Internal field name for form data
            label: Display label (defaults to field_name)
            form: Coordinator to register with while mounted
            validator: Function that returns error message or None if valid
            required: Reject blank input before running ``validator``
            help_text: Help text shown below input
            placeholder: Placeholder text in input
            default: Initial value, also the baseline for change tracking
            password: Whether to mask input
            show_errors: Render error text; defaults to project settings
            id: Widget ID
            classes: CSS classes
        """
        super().__init__(id=id, classes=classes)
        self.field_name = field_name
        self.label_text = label or field_name.replace("_", " ").title()
        self.required = required
        self.help_text = help_text
        self.placeholder = placeholder
        self.default = default
        self.password = password
        self.form = form
        self.show_errors = (
            get_settings().show_errors if show_errors is None else show_errors
        )

        rule = validator
        if required:
            required_check = required_rule(f"{self.label_text} is required")
            rule = all_of(required_check, validator) if validator else required_check

        self.handle = FieldHandle(
            validator=rule,
            initial_value=default,
            on_error=self._handle_error,
            name=field_name,
        )

    @property
    def value(self) -> str:
        return self.handle.current_value

    @property
    def error_message(self) -> str:
        """Error text currently displayed (empty when hidden or valid)."""
        if self.show_errors and self.handle.should_show_error:
            return self.handle.error_message
        return ""

    def compose(self) -> ComposeResult:
        """Compose the widget layout."""
        label_display = self.label_text
        if self.required:
            label_display = f"{label_display} [red]*[/red]"
        yield Label(label_display, classes="field-label")
        yield Input(
            value=self.default,
            placeholder=self.placeholder,
            password=self.password,
            id=f"{self.field_name}_input",
        )
        yield Static("", classes="error-text", id=f"{self.field_name}_error")
        if self.help_text:
            yield Static(self.help_text, classes="help-text")

    def on_mount(self) -> None:
        if self.form is not None:
            self.handle.attach(self.form)

    def on_unmount(self) -> None:
        if not self.handle.is_disposed:
            self.handle.dispose()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Forward typing to the field state."""
        if self.handle.is_disposed:
            return
        self.handle.set_value(event.value)
        self._refresh_error()
        self.post_message(self.Changed(self, event.value))

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        if self.handle.is_disposed:
            return
        self.handle.focus_gained()
        self._refresh_error()

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        if self.handle.is_disposed:
            return
        self.handle.focus_lost()
        self._refresh_error()

    def _handle_error(self, error: str | None) -> None:
        self._refresh_error()
        self.post_message(self.Validated(self, error))

    def _refresh_error(self) -> None:
        if not self.is_mounted:
            return
        error_widget = self.query_one(f"#{self.field_name}_error", Static)
        error_widget.update(self.error_message)

        input_widget = self.query_one(f"#{self.field_name}_input", Input)
        input_widget.set_class(self.handle.should_show_error, "-invalid")

    def validate(self, force_show_error: bool = False) -> bool:
        """Validate this field alone and return whether it passed."""
        self.handle.validate(force_show_error=force_show_error)
        self._refresh_error()
        return not self.handle.has_error

    def set_value(self, value: str) -> None:
        """Set the input value programmatically.

        The resulting ``Input.Changed`` reaches the field state through
        :meth:`on_input_changed`, like typed input does.
        """
        input_widget = self.query_one(f"#{self.field_name}_input", Input)
        input_widget.value = value

    def focus_input(self) -> None:
        """Focus the input field."""
        input_widget = self.query_one(f"#{self.field_name}_input", Input)
        input_widget.focus()
