"""
Infrastructure and startup errors.
"""

from typing import Optional

from scaffold_api.domain.exceptions.base import DomainError


class DatabaseError(DomainError):
    """Raised when a database operation fails for reasons other than conflicts."""

    code = "DATABASE_ERROR"
    status_code = 500

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.__cause__ = cause


class ConfigurationError(Exception):
    """Raised at startup when configuration values are unusable."""
