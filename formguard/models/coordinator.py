"""Form-level aggregation of field validity and change state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Iterator, Optional, Tuple

from formguard.lib.errors import (
    EmptyRegistryError,
    FieldDisposedError,
    UndisposedFieldsError,
)
from formguard.models.registry import FieldRegistry

if TYPE_CHECKING:
    from formguard.models.field_handle import FieldHandle, FieldId
    from formguard.settings import FormSettings

logger = logging.getLogger(__name__)

__all__ = ["FormConfig", "FormCoordinator"]


@dataclass(frozen=True)
class FormConfig:
    """Policy shared by every field of a form.

    Attributes:
        hide_error_on_focus: Suppress a field's visible error while it is focused
        on_changed: Called once for every value mutation of any field
    """

    hide_error_on_focus: bool = False
    on_changed: Optional[Callable[[], None]] = None


class FormCoordinator:
    """Owns the live fields of one form and answers form-level queries.

    Fields join with :meth:`FieldHandle.attach` and leave with
    :meth:`FieldHandle.detach` or :meth:`FieldHandle.dispose`; the
    coordinator never owns their lifetime. Use it as a context manager to
    assert that every field was disposed when the form scope ends::

        with FormCoordinator(hide_error_on_focus=True) as form:
            email = FieldHandle(validator=required("Please enter your email"))
            email.attach(form)
            ...
            email.dispose()
    """

    def __init__(
        self,
        hide_error_on_focus: bool = False,
        on_changed: Optional[Callable[[], None]] = None,
        *,
        name: Optional[str] = None,
        config: Optional[FormConfig] = None,
    ) -> None:
        self.config = config or FormConfig(
            hide_error_on_focus=hide_error_on_focus, on_changed=on_changed
        )
        self.name = name
        self._registry = FieldRegistry()

    @classmethod
    def from_settings(
        cls,
        settings: "FormSettings",
        on_changed: Optional[Callable[[], None]] = None,
        *,
        name: Optional[str] = None,
    ) -> "FormCoordinator":
        """Build a coordinator whose policy comes from project settings."""
        return cls(
            hide_error_on_focus=settings.hide_error_on_focus,
            on_changed=on_changed,
            name=name,
        )

    @property
    def hide_error_on_focus(self) -> bool:
        return self.config.hide_error_on_focus

    @property
    def fields(self) -> Tuple["FieldHandle", ...]:
        return self._registry.snapshot()

    # Registration protocol

    def register(self, field: "FieldHandle") -> None:
        """Add ``field`` to the form. Registering a member again is a no-op.

        A field belongs to one form at a time, so a field registered with
        another coordinator is unregistered from it first.

        Raises:
            FieldDisposedError: If ``field`` was disposed
        """
        if field.is_disposed:
            raise FieldDisposedError(field.id, "register", field.name)
        current = field.coordinator
        if current is not None and current is not self:
            current.unregister(field)
        self._registry.add(field)
        field._coordinator = self

    def unregister(self, field: "FieldHandle") -> None:
        """Remove ``field`` from the form.

        Raises:
            UnpairedUnregisterError: If ``field`` is not registered
        """
        self._registry.remove(field)
        if field.coordinator is self:
            field._coordinator = None

    def get(self, field_id: "FieldId") -> Optional["FieldHandle"]:
        """Look up a registered field by identity."""
        return self._registry.get(field_id)

    def __contains__(self, field: object) -> bool:
        return field in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __iter__(self) -> Iterator["FieldHandle"]:
        return iter(self._registry)

    # Aggregate queries

    def is_valid(self, force_show_error: bool = False) -> bool:
        """Validate every field and report whether all of them passed.

        Every field is validated, even after the first failure, so that all
        visible error states update together.

        Args:
            force_show_error: Reveal errors regardless of focus or touched state

        Raises:
            EmptyRegistryError: If no field is registered
        """
        fields = self._registry.snapshot()
        if not fields:
            raise EmptyRegistryError(self.name)

        valid = True
        for field in fields:
            # A callback earlier in the scan may have detached this field
            if field not in self._registry:
                continue
            field.validate(force_show_error=force_show_error)
            if field.has_error:
                valid = False

        logger.debug(
            "Form %s validated %d field(s): %s",
            self.name or "<anonymous>",
            len(fields),
            "valid" if valid else "invalid",
        )
        return valid

    @property
    def is_changed(self) -> bool:
        """True if any registered field differs from its initial value."""
        return any(field.changed_from_initial for field in self._registry.snapshot())

    def errors(self) -> Dict["FieldId", str]:
        """Last computed error of each field that has one. Runs no validation."""
        return {
            field.id: field.error_message
            for field in self._registry.snapshot()
            if field.has_error
        }

    def field_did_change(self) -> None:
        """Forward a field mutation to the form's ``on_changed`` callback."""
        if self.config.on_changed is not None:
            self.config.on_changed()

    # Scope

    def close(self) -> None:
        """End the form scope.

        Raises:
            UndisposedFieldsError: If fields are still registered
        """
        remaining = self._registry.ids()
        if remaining:
            raise UndisposedFieldsError(remaining)

    def __enter__(self) -> "FormCoordinator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Do not mask the exception that is already unwinding the scope
        if exc_type is None:
            self.close()
        elif len(self._registry):
            logger.warning(
                "Form %s exited with %d field(s) still registered",
                self.name or "<anonymous>",
                len(self._registry),
            )

    def __repr__(self) -> str:
        return (
            f"FormCoordinator(name={self.name!r}, fields={len(self._registry)}, "
            f"hide_error_on_focus={self.hide_error_on_focus})"
        )
