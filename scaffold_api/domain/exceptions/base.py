"""
DomainError - Base for errors that carry a stable code and HTTP status.
"""

from typing import Any, Optional


class DomainError(Exception):
    """Base class for domain errors; `extensions` is what GraphQL clients see."""

    code: str = "DOMAIN_ERROR"
    status_code: int = 400

    def __init__(self, message: str, extensions: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self._extra = extensions or {}

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, "statusCode": self.status_code, **self._extra}
