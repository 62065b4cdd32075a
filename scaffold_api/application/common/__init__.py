"""Shared application interfaces and validation."""

from scaffold_api.application.common.interfaces import CommandHandler, QueryHandler
from scaffold_api.application.common.validation import (
    ValidationResult,
    validate,
    violations_from_errors,
)

__all__ = [
    "CommandHandler",
    "QueryHandler",
    "ValidationResult",
    "validate",
    "violations_from_errors",
]
