"""UI-agnostic form state.

These classes hold the validation and change-tracking state of a form and
can be used and tested without any terminal UI toolkit installed.
"""

from formguard.models.coordinator import FormConfig, FormCoordinator
from formguard.models.field_handle import FieldHandle, FieldId, new_field_id
from formguard.models.registry import FieldRegistry
from formguard.models.sources import FocusNode, Listenable, TextController

__all__ = [
    "FieldHandle",
    "FieldId",
    "FieldRegistry",
    "FocusNode",
    "FormConfig",
    "FormCoordinator",
    "Listenable",
    "TextController",
    "new_field_id",
]
