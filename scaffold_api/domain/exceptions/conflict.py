"""
ConflictError - Raised when a resource already exists.
Maps to: HTTP 409 Conflict
"""

from scaffold_api.domain.exceptions.base import DomainError


class ConflictError(DomainError):
    code = "CONFLICT"
    status_code = 409


class EmailAlreadyExistsError(ConflictError):
    code = "EMAIL_ALREADY_EXISTS"

    def __init__(self, email: str):
        super().__init__(f"Email '{email}' is already registered")


class UsernameAlreadyExistsError(ConflictError):
    code = "USERNAME_ALREADY_EXISTS"

    def __init__(self, user_name: str):
        super().__init__(f"Username '{user_name}' is already taken")
