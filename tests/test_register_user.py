"""
Unit tests for RegisterUserHandler.

Run with: pytest tests/test_register_user.py -v
"""

import asyncio

import pytest

from scaffold_api.application.commands.auth import RegisterUserHandler
from scaffold_api.application.dto.auth import SignUpArgsDto
from scaffold_api.domain.entities.user import UserRole, UserStatus
from scaffold_api.domain.exceptions import (
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
)
from scaffold_api.infrastructure.security import BcryptPasswordHasher

from fakes import FakePasswordHasher, InMemoryUserRepository


def _args(email="ada@example.com", user_name="ada", password="Secret1!"):
    return SignUpArgsDto.model_validate(
        {"input": {"email": email, "userName": user_name, "password": password}}
    )


@pytest.fixture()
def repository():
    return InMemoryUserRepository()


@pytest.fixture()
def handler(repository):
    return RegisterUserHandler(repository, FakePasswordHasher())


class TestRegisterUser:
    def test_creates_registered_user(self, handler, repository):
        user = asyncio.run(handler.execute(_args()))

        assert user.email == "ada@example.com"
        assert user.user_name == "ada"
        assert user.status is UserStatus.REGISTERED
        assert user.role is UserRole.USER
        assert not hasattr(user, "password_hash")
        assert repository.users[0].password_hash == "hashed:Secret1!"

    def test_rejects_existing_email(self, handler, repository):
        asyncio.run(handler.execute(_args()))

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            asyncio.run(handler.execute(_args(email="ADA@example.com", user_name="other")))

        assert exc_info.value.status_code == 409
        assert len(repository.users) == 1

    def test_rejects_existing_user_name(self, handler, repository):
        asyncio.run(handler.execute(_args()))

        with pytest.raises(UsernameAlreadyExistsError) as exc_info:
            asyncio.run(handler.execute(_args(email="other@example.com")))

        assert exc_info.value.extensions["code"] == "USERNAME_ALREADY_EXISTS"


class TestBcryptPasswordHasher:
    def test_hash_verifies_only_the_original_password(self):
        hasher = BcryptPasswordHasher(rounds=4)

        async def scenario():
            hashed = await hasher.hash("Secret1!")
            return hashed, await hasher.verify("Secret1!", hashed), await hasher.verify(
                "Wrong1!", hashed
            )

        hashed, good, bad = asyncio.run(scenario())

        assert hashed.startswith("$2b$04$")
        assert good is True
        assert bad is False
