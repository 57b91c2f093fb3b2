"""Reusable validation rules for form fields.

A validation rule is a pure function from the field's current text to an
optional error message. ``None`` means the value is valid; any string,
including the empty string, means the field has an error.

Length and pattern rules accept empty input so they can be combined with
:func:`required` without producing two messages for a blank field.

Example:
    >>> rule = all_of(required("Please enter your email"), email())
    >>> rule("")
    'Please enter your email'
    >>> rule("user@example.com") is None
    True
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Pattern, Union

__all__ = [
    "ValidationRule",
    "required",
    "min_length",
    "max_length",
    "matches",
    "email",
    "all_of",
]

ValidationRule = Callable[[str], Optional[str]]

# Deliberately loose: one "@", no whitespace, a dot in the domain part
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def required(message: str = "This field is required") -> ValidationRule:
    """Reject values that are empty or whitespace only."""

    def rule(value: str) -> Optional[str]:
        if not value or not value.strip():
            return message
        return None

    return rule


def min_length(length: int, message: Optional[str] = None) -> ValidationRule:
    """Reject non-empty values shorter than ``length`` characters."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    text = message or f"Must be at least {length} characters"

    def rule(value: str) -> Optional[str]:
        if value and len(value) < length:
            return text
        return None

    return rule


def max_length(length: int, message: Optional[str] = None) -> ValidationRule:
    """Reject values longer than ``length`` characters."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    text = message or f"Must be at most {length} characters"

    def rule(value: str) -> Optional[str]:
        if len(value) > length:
            return text
        return None

    return rule


def matches(
    pattern: Union[str, Pattern[str]], message: str = "Invalid format"
) -> ValidationRule:
    """Reject non-empty values that do not fully match ``pattern``."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def rule(value: str) -> Optional[str]:
        if value and not compiled.fullmatch(value):
            return message
        return None

    return rule


def email(message: str = "Please enter a valid email address") -> ValidationRule:
    """Reject non-empty values that do not look like an email address."""
    return matches(_EMAIL_RE, message)


def all_of(*rules: ValidationRule) -> ValidationRule:
    """Chain rules; the first error returned wins."""

    def rule(value: str) -> Optional[str]:
        for check in rules:
            error = check(value)
            if error is not None:
                return error
        return None

    return rule
