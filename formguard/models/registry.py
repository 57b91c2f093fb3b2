"""Identity-keyed membership of live fields in a form."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Tuple

from formguard.lib.errors import UnpairedUnregisterError

if TYPE_CHECKING:
    from formguard.models.field_handle import FieldHandle, FieldId

logger = logging.getLogger(__name__)

__all__ = ["FieldRegistry"]


class FieldRegistry:
    """The set of fields currently registered with one form.

    ``add`` is idempotent because rebuild cycles legitimately register a
    live field again. ``remove`` is strict: removing a field that is not a
    member means mount/unmount calls are unpaired.

    Not thread-safe. The registry, its coordinator and the field handles
    are driven from the thread that runs the UI event loop.
    """

    def __init__(self) -> None:
        self._fields: Dict["FieldId", "FieldHandle"] = {}

    def add(self, field: "FieldHandle") -> bool:
        """Add ``field``; return False if it was already a member."""
        if field.id in self._fields:
            logger.debug("Field %s already registered", field.label)
            return False
        self._fields[field.id] = field
        logger.debug("Registered field %s", field.label)
        return True

    def remove(self, field: "FieldHandle") -> None:
        """Remove ``field``.

        Raises:
            UnpairedUnregisterError: If ``field`` is not a member
        """
        if field.id not in self._fields:
            logger.warning("Unpaired unregister for field %s", field.label)
            raise UnpairedUnregisterError(field.id, field.name)
        del self._fields[field.id]
        logger.debug("Unregistered field %s", field.label)

    def get(self, field_id: "FieldId") -> Optional["FieldHandle"]:
        return self._fields.get(field_id)

    def snapshot(self) -> Tuple["FieldHandle", ...]:
        """Current members, detached from later mutation."""
        return tuple(self._fields.values())

    def ids(self) -> Tuple["FieldId", ...]:
        return tuple(self._fields)

    def __contains__(self, field: object) -> bool:
        return getattr(field, "id", field) in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator["FieldHandle"]:
        return iter(self.snapshot())
