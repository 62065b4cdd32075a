"""
Register User Command.

- RegisterUserUseCase: the contract the signUp resolver depends on
- RegisterUserHandler: default implementation backed by UserRepository

Handler.execute():
1. Reject an email that is already registered (case-insensitive)
2. Reject a user name that is already taken
3. Hash the password and persist the user as REGISTERED / USER
4. Return a UserDto (no password hash)
"""

import logging
from abc import abstractmethod

from scaffold_api.application.common.interfaces import CommandHandler
from scaffold_api.application.dto.auth import SignUpArgsDto
from scaffold_api.application.dto.user import UserDto
from scaffold_api.domain.exceptions import (
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
)
from scaffold_api.domain.ports.password_hasher import PasswordHasher
from scaffold_api.domain.ports.repositories import NewUser, UserRepository

logger = logging.getLogger(__name__)


class RegisterUserUseCase(CommandHandler[UserDto]):
    @abstractmethod
    async def execute(self, command: SignUpArgsDto) -> UserDto: ...


class RegisterUserHandler(RegisterUserUseCase):
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self._user_repository = user_repository
        self._password_hasher = password_hasher

    async def execute(self, command: SignUpArgsDto) -> UserDto:
        data = command.input
        logger.debug("Starting user registration", extra={"user_name": data.user_name})
        try:
            if await self._user_repository.find_by_email(data.email):
                raise EmailAlreadyExistsError(data.email)
            if await self._user_repository.find_by_user_name(data.user_name):
                raise UsernameAlreadyExistsError(data.user_name)

            password_hash = await self._password_hasher.hash(data.password)
            user = await self._user_repository.create(
                NewUser(
                    email=data.email,
                    user_name=data.user_name,
                    password_hash=password_hash,
                )
            )
        except Exception as e:
            logger.error(f"User registration failed: {e}")
            raise

        logger.debug(
            "User registration completed", extra={"user_id": user.id, "user_email": user.email}
        )
        return UserDto.model_validate(user)
