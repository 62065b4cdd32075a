"""
Prisma User Repository Implementation.

- Implements UserRepository port from domain layer
- Uses the shared Prisma client owned by Database
- Maps between Prisma records and the User entity
- Unique violations become ConflictError, other Prisma failures DatabaseError

Mapping:
- Prisma model fields: id, email, password, user_name, status, role, created_at, updated_at
- Domain entity: User (password -> password_hash)
"""

import logging
from typing import Any, Optional

from prisma import errors as prisma_errors

from scaffold_api.domain.entities.user import User, UserRole, UserStatus
from scaffold_api.domain.exceptions import ConflictError, DatabaseError
from scaffold_api.domain.ports.repositories import NewUser, UserRepository
from scaffold_api.infrastructure.database import Database

logger = logging.getLogger(__name__)


class PrismaUserRepository(UserRepository):
    _database: Database

    def __init__(self, database: Database):
        self._database = database

    @property
    def _users(self):
        return self._database.client.user

    def _to_entity(self, record: Any) -> User:
        """Map Prisma record to domain entity."""
        return User(
            id=record.id,
            email=record.email,
            user_name=record.user_name,
            password_hash=record.password,
            status=UserStatus(record.status),
            role=UserRole(record.role),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def find_by_email(self, email: str) -> Optional[User]:
        try:
            record = await self._users.find_first(
                where={"email": {"equals": email, "mode": "insensitive"}}
            )
        except prisma_errors.PrismaError as e:
            raise DatabaseError("An unexpected error occurred while finding user", e)
        return self._to_entity(record) if record else None

    async def find_by_user_name(self, user_name: str) -> Optional[User]:
        try:
            record = await self._users.find_unique(where={"user_name": user_name})
        except prisma_errors.PrismaError as e:
            raise DatabaseError("An unexpected error occurred while finding user", e)
        return self._to_entity(record) if record else None

    async def create(self, data: NewUser) -> User:
        logger.debug("Creating user", extra={"user_name": data.user_name})
        try:
            record = await self._users.create(
                data={
                    "email": data.email,
                    "user_name": data.user_name,
                    "password": data.password_hash,
                    "status": data.status.value,
                    "role": data.role.value,
                }
            )
        except prisma_errors.UniqueViolationError as e:
            raise ConflictError("User with this email or username already exists") from e
        except prisma_errors.PrismaError as e:
            raise DatabaseError("An unexpected error occurred while creating user", e)
        return self._to_entity(record)
