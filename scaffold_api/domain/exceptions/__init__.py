"""
DOMAIN EXCEPTIONS - Business rule violations

Raised by domain and application logic, mapped to HTTP status codes by the
presentation layer and carried to GraphQL clients through `extensions`.
"""

from scaffold_api.domain.exceptions.base import DomainError
from scaffold_api.domain.exceptions.conflict import (
    ConflictError,
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
)
from scaffold_api.domain.exceptions.entity_not_found import EntityNotFoundError
from scaffold_api.domain.exceptions.validation_error import (
    RequestValidationError,
    Violation,
)
from scaffold_api.domain.exceptions.infrastructure import (
    ConfigurationError,
    DatabaseError,
)

__all__ = [
    "DomainError",
    "ConflictError",
    "EmailAlreadyExistsError",
    "UsernameAlreadyExistsError",
    "EntityNotFoundError",
    "RequestValidationError",
    "Violation",
    "ConfigurationError",
    "DatabaseError",
]
