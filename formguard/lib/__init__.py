"""Shared building blocks: errors, logging and validation rules."""

from formguard.lib.errors import (
    EmptyRegistryError,
    FieldDisposedError,
    FormContractError,
    FormError,
    SourceDisposedError,
    UndisposedFieldsError,
    UnpairedUnregisterError,
)
from formguard.lib.logging import JSONFormatter, get_log_level_from_env, setup_logging
from formguard.lib.validators import (
    ValidationRule,
    all_of,
    email,
    matches,
    max_length,
    min_length,
    required,
)

__all__ = [
    "FormError",
    "FormContractError",
    "EmptyRegistryError",
    "UnpairedUnregisterError",
    "FieldDisposedError",
    "UndisposedFieldsError",
    "SourceDisposedError",
    "JSONFormatter",
    "get_log_level_from_env",
    "setup_logging",
    "ValidationRule",
    "required",
    "min_length",
    "max_length",
    "matches",
    "email",
    "all_of",
]
