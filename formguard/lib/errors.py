"""Structured exception hierarchy for form coordination.

Validation failures are never exceptions: they are surfaced per field as
``has_error`` / ``error_message`` and through the ``on_error`` callback.
The exceptions here describe lifecycle and precondition violations made by
the code hosting the form (mount/unmount pairing, empty forms, use after
dispose). They abort the offending operation with a diagnostic naming the
field involved.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

__all__ = [
    "FormError",
    "FormContractError",
    "EmptyRegistryError",
    "UnpairedUnregisterError",
    "FieldDisposedError",
    "UndisposedFieldsError",
    "SourceDisposedError",
]


class FormError(Exception):
    """Base exception for all formguard errors.

    Provides structured error information for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.details = details or {}
        self.suggestion = suggestion

        parts = [message]

        if details:
            detail_lines = [f"  {k}: {v}" for k, v in details.items()]
            parts.append("\nDetails:")
            parts.extend(detail_lines)

        if suggestion:
            parts.append(f"\nSuggestion: {suggestion}")

        super().__init__("\n".join(parts) if len(parts) > 1 else message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class FormContractError(FormError):
    """A precondition of the registration protocol was violated.

    These are programming errors in the hosting code, distinct from the
    user-facing validation results a field produces.
    """


class EmptyRegistryError(FormContractError):
    """``is_valid`` was called on a form with no registered fields."""

    def __init__(self, form_name: Optional[str] = None) -> None:
        details = {"form": form_name} if form_name else None
        super().__init__(
            "No fields registered in the form",
            details=details,
            suggestion="Attach at least one field before validating the form",
        )


class UnpairedUnregisterError(FormContractError):
    """A field was unregistered without being registered first."""

    def __init__(self, field_id: str, field_name: Optional[str] = None) -> None:
        self.field_id = field_id
        self.field_name = field_name
        details: Dict[str, Any] = {"field_id": field_id}
        if field_name:
            details["field_name"] = field_name
        super().__init__(
            "Attempting to unregister a field that was not registered",
            details=details,
            suggestion=(
                "Check that attach/detach calls are paired and dispose() runs once"
            ),
        )


class FieldDisposedError(FormContractError):
    """A field handle was used after ``dispose()``."""

    def __init__(
        self, field_id: str, operation: str, field_name: Optional[str] = None
    ) -> None:
        self.field_id = field_id
        self.operation = operation
        details: Dict[str, Any] = {"field_id": field_id, "operation": operation}
        if field_name:
            details["field_name"] = field_name
        super().__init__(
            f"Cannot {operation} a disposed field",
            details=details,
        )


class UndisposedFieldsError(FormContractError):
    """A form scope was closed while fields were still registered."""

    def __init__(self, field_ids: Iterable[str]) -> None:
        self.field_ids = sorted(field_ids)
        super().__init__(
            f"Form closed with {len(self.field_ids)} field(s) still registered",
            details={"field_ids": ", ".join(self.field_ids)},
            suggestion="Dispose every field before leaving the form scope",
        )


class SourceDisposedError(FormContractError):
    """A value or focus source was used after it was disposed."""

    def __init__(self, source_type: str) -> None:
        self.source_type = source_type
        super().__init__(f"{source_type} was used after being disposed")
