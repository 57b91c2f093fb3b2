"""Rendering-layer bindings for Textual and prompt_toolkit."""

from __future__ import annotations

from formguard.widgets.buffer_field import BufferField
from formguard.widgets.validated_input import FormScope, ValidatedInput

__all__ = [
    "BufferField",
    "FormScope",
    "ValidatedInput",
]
