"""Validation and change coordination for the fields of a form.

The core (``formguard.models``) has no UI dependency: a
:class:`FormCoordinator` tracks the live :class:`FieldHandle` objects of
one form and answers "is this form valid" and "has this form changed".
Terminal UI bindings live in ``formguard.widgets``.

Usage:
    python -m formguard    # Run the sign-in demo
"""

from __future__ import annotations

from formguard.lib.errors import (
    EmptyRegistryError,
    FieldDisposedError,
    FormContractError,
    FormError,
    UnpairedUnregisterError,
)
from formguard.models import FieldHandle, FieldId, FormConfig, FormCoordinator

__version__ = "0.1.0"

__all__ = [
    "EmptyRegistryError",
    "FieldDisposedError",
    "FieldHandle",
    "FieldId",
    "FormConfig",
    "FormContractError",
    "FormCoordinator",
    "FormError",
    "SignInApp",
    "UnpairedUnregisterError",
]


def __getattr__(name: str):
    """Lazy import of the Textual demo."""
    if name == "SignInApp":
        from formguard.app import SignInApp
        return SignInApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
