"""
User Repository Port - Interface for user persistence.
Implementation: scaffold_api/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from scaffold_api.domain.entities.user import User, UserRole, UserStatus


@dataclass(frozen=True)
class NewUser:
    email: str
    user_name: str
    password_hash: str
    status: UserStatus = UserStatus.REGISTERED
    role: UserRole = UserRole.USER


class UserRepository(ABC):
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup."""

    @abstractmethod
    async def find_by_user_name(self, user_name: str) -> Optional[User]: ...

    @abstractmethod
    async def create(self, data: NewUser) -> User: ...
