"""Sign-in demo showing coordinated validation in a Textual app."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from formguard.lib.validators import all_of, email, min_length, required
from formguard.widgets import FormScope, ValidatedInput

logger = logging.getLogger(__name__)


class SignInApp(App):
    """Email and password form with Submit and change-check actions."""

    TITLE = "formguard"
    SUB_TITLE = "Sign-in example"

    CSS = """
    SignInApp .form-container {
        width: 60;
        height: auto;
        padding: 1 2;
        border: round $primary;
    }

    SignInApp .button-row {
        height: auto;
        margin-top: 1;
    }

    SignInApp Button {
        margin-right: 2;
    }

    SignInApp #status {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, hide_error_on_focus: bool | None = None) -> None:
        super().__init__()
        self._hide_error_on_focus = hide_error_on_focus
        self.change_count = 0
        self.last_status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(classes="form-container"):
            scope = FormScope(
                hide_error_on_focus=self._hide_error_on_focus, id="signin"
            )
            with scope:
                yield ValidatedInput(
                    "email",
                    "Email",
                    form=scope.form,
                    validator=all_of(required("Please enter your email"), email()),
                    placeholder="you@example.com",
                    id="email",
                )
                yield ValidatedInput(
                    "password",
                    "Password",
                    form=scope.form,
                    validator=all_of(
                        required("Please enter your password"), min_length(8)
                    ),
                    password=True,
                    id="password",
                )
            with Horizontal(classes="button-row"):
                yield Button("Submit", variant="primary", id="submit")
                yield Button("Check changes", id="check-changes")
            yield Static("", id="status")
        yield Footer()

    @property
    def form_scope(self) -> FormScope:
        return self.query_one("#signin", FormScope)

    def _set_status(self, text: str) -> None:
        self.last_status = text
        self.query_one("#status", Static).update(text)

    def on_form_scope_changed(self, event: FormScope.Changed) -> None:
        self.change_count += 1

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit":
            valid = self.form_scope.is_valid(force_show_error=True)
            logger.info("Submit pressed, form %s", "valid" if valid else "invalid")
            self._set_status("Form is valid" if valid else "Form is invalid")
        elif event.button.id == "check-changes":
            changed = self.form_scope.is_changed
            self._set_status("Form is changed" if changed else "Form is not changed")


def run_demo(hide_error_on_focus: bool | None = None) -> None:
    SignInApp(hide_error_on_focus=hide_error_on_focus).run()
