"""Tests for the Textual widgets, driven through the sign-in demo app."""

from __future__ import annotations

import asyncio

from textual.widgets import Button

from formguard.app import SignInApp
from formguard.widgets import FormScope, ValidatedInput

SIZE = (100, 40)


def _inputs(app: SignInApp) -> tuple[ValidatedInput, ValidatedInput]:
    return (
        app.query_one("#email", ValidatedInput),
        app.query_one("#password", ValidatedInput),
    )


class TestSignInApp:
    """Tests for SignInApp."""

    def test_fields_register_on_mount(self) -> None:
        """Both inputs join the scope's form when mounted."""

        async def _run():
            app = SignInApp(hide_error_on_focus=False)
            async with app.run_test(size=SIZE) as pilot:
                await pilot.pause()
                email, password = _inputs(app)
                form = app.form_scope.form
                return len(form), email.handle in form, password.handle in form

        assert asyncio.run(_run()) == (2, True, True)

    def test_submit_reveals_errors(self) -> None:
        """Submitting an empty form shows both required messages."""

        async def _run():
            app = SignInApp(hide_error_on_focus=False)
            async with app.run_test(size=SIZE) as pilot:
                await pilot.click("#submit")
                await pilot.pause()
                email, password = _inputs(app)
                return app.last_status, email.error_message, password.error_message

        status, email_error, password_error = asyncio.run(_run())

        assert status == "Form is invalid"
        assert email_error == "Please enter your email"
        assert password_error == "Please enter your password"

    def test_error_appears_after_leaving_field(self) -> None:
        """A touched invalid field shows its error once it loses focus."""

        async def _run():
            app = SignInApp(hide_error_on_focus=False)
            async with app.run_test(size=SIZE) as pilot:
                email, password = _inputs(app)
                password.focus_input()
                await pilot.pause()
                await pilot.press("s", "h", "o", "r", "t")
                await pilot.pause()
                while_focused = password.error_message

                email.focus_input()
                await pilot.pause()
                return while_focused, password.error_message, password.handle.is_touched

        while_focused, after_blur, touched = asyncio.run(_run())

        assert while_focused == ""
        assert after_blur == "Must be at least 8 characters"
        assert touched is True

    def test_valid_submit(self) -> None:
        """Filling both fields makes the form valid."""

        async def _run():
            app = SignInApp(hide_error_on_focus=False)
            async with app.run_test(size=SIZE) as pilot:
                email, password = _inputs(app)
                email.set_value("me@example.com")
                password.set_value("correct horse")
                await pilot.pause()
                await pilot.click("#submit")
                await pilot.pause()
                return app.last_status, email.error_message

        assert asyncio.run(_run()) == ("Form is valid", "")

    def test_change_tracking(self) -> None:
        """Edits notify the app and are visible through Check changes."""

        async def _check_changes(app: SignInApp, pilot) -> tuple[bool, str]:
            app.query_one("#check-changes", Button).press()
            await pilot.pause()
            return app.form_scope.is_changed, app.last_status

        async def _run():
            app = SignInApp(hide_error_on_focus=False)
            async with app.run_test(size=SIZE) as pilot:
                email, _ = _inputs(app)
                await pilot.pause()
                baseline = app.change_count
                before = await _check_changes(app, pilot)

                email.set_value("me@example.com")
                await pilot.pause()
                after = await _check_changes(app, pilot)

                email.set_value("")
                await pilot.pause()
                reverted = await _check_changes(app, pilot)
                return before, after, reverted, app.change_count - baseline

        before, after, reverted, notifications = asyncio.run(_run())

        assert before == (False, "Form is not changed")
        assert after == (True, "Form is changed")
        assert reverted == (False, "Form is not changed")
        assert notifications == 2

    def test_hide_error_on_focus(self) -> None:
        """With the hiding policy, refocusing an invalid field hides its error."""

        async def _run():
            app = SignInApp(hide_error_on_focus=True)
            async with app.run_test(size=SIZE) as pilot:
                email, _ = _inputs(app)
                await pilot.click("#submit")
                await pilot.pause()
                shown = email.error_message

                email.focus_input()
                await pilot.pause()
                return shown, email.handle.is_error_hidden, email.error_message

        shown, hidden, while_focused = asyncio.run(_run())

        assert shown == "Please enter your email"
        assert hidden is True
        assert while_focused == ""

    def test_unmount_disposes_field(self) -> None:
        """Removing an input disposes its handle and leaves the form."""

        async def _run():
            app = SignInApp(hide_error_on_focus=False)
            async with app.run_test(size=SIZE) as pilot:
                _, password = _inputs(app)
                await password.remove()
                await pilot.pause()
                scope = app.query_one("#signin", FormScope)
                return password.handle.is_disposed, len(scope.form)

        assert asyncio.run(_run()) == (True, 1)
