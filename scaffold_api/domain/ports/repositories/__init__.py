"""Repository ports."""

from scaffold_api.domain.ports.repositories.user_repository import (
    NewUser,
    UserRepository,
)

__all__ = ["NewUser", "UserRepository"]
