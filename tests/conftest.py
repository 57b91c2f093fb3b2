"""Shared fixtures for formguard tests."""

from __future__ import annotations

from typing import Callable, Generator, Optional

import pytest

from formguard.lib.validators import required
from formguard.models import FieldHandle, FormCoordinator


class ChangeCounter:
    """Callable that counts form-level change notifications."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


class ErrorRecorder:
    """Callable that records every on_error payload."""

    def __init__(self) -> None:
        self.payloads: list[Optional[str]] = []

    def __call__(self, error: Optional[str]) -> None:
        self.payloads.append(error)


@pytest.fixture
def changes() -> ChangeCounter:
    return ChangeCounter()


@pytest.fixture
def errors() -> ErrorRecorder:
    return ErrorRecorder()


@pytest.fixture
def form(changes: ChangeCounter) -> FormCoordinator:
    """Form with the default policy that counts change notifications."""
    return FormCoordinator(on_changed=changes, name="test-form")


@pytest.fixture
def hiding_form() -> FormCoordinator:
    """Form that hides errors while a field is focused."""
    return FormCoordinator(hide_error_on_focus=True, name="hiding-form")


@pytest.fixture
def email_field(errors: ErrorRecorder) -> Generator[FieldHandle, None, None]:
    """Unattached required email field that records on_error payloads."""
    field = FieldHandle(
        validator=required("Please enter your email"),
        on_error=errors,
        name="email",
    )
    yield field
    if not field.is_disposed:
        field.dispose()


@pytest.fixture
def make_field() -> Generator[Callable[..., FieldHandle], None, None]:
    """Factory for field handles that are disposed after the test."""
    created: list[FieldHandle] = []

    def factory(**kwargs) -> FieldHandle:
        field = FieldHandle(**kwargs)
        created.append(field)
        return field

    yield factory

    for field in created:
        if not field.is_disposed:
            field.dispose()
