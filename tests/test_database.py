"""
Tests for the shared Database client and its container lifecycle.

Run with: pytest tests/test_database.py -v
"""

import asyncio

import pytest

from scaffold_api.domain.ports.health_probe import HealthProbe
from scaffold_api.domain.exceptions import DatabaseError
from scaffold_api.infrastructure.database import Database
from scaffold_api.infrastructure.persistence import PrismaUserRepository
from scaffold_api.domain.ports.repositories import NewUser, UserRepository
from scaffold_api.setup.ioc import create_container

from fakes import FakeDatabaseProvider, FakePrismaClient


class TestDatabase:
    def test_connect_and_disconnect_are_idempotent(self):
        client = FakePrismaClient()
        database = Database(client)

        async def scenario():
            await database.connect()
            await database.connect()
            assert database.is_connected()
            await database.disconnect()
            await database.disconnect()

        asyncio.run(scenario())

        assert client.connect_calls == 1
        assert client.disconnect_calls == 1
        assert not database.is_connected()

    def test_health_check_ok(self):
        result = asyncio.run(Database(FakePrismaClient()).health_check())

        assert result["status"] == "ok"

    def test_health_check_never_raises(self):
        result = asyncio.run(Database(FakePrismaClient(healthy=False)).health_check())

        assert result == {"status": "error", "message": "connection refused"}


class TestDatabaseSingleton:
    """Test that every consumer in the process shares one Database."""

    def test_same_instance_across_requests(self):
        database = Database(FakePrismaClient())

        async def scenario():
            container = create_container(FakeDatabaseProvider(database))
            async with container() as first_request:
                first = await first_request.get(Database)
                probe = await first_request.get(HealthProbe)
                repository = await first_request.get(UserRepository)
            async with container() as second_request:
                second = await second_request.get(Database)
            await container.close()
            return first, second, probe, repository

        first, second, probe, repository = asyncio.run(scenario())

        assert first is second is probe is database
        assert isinstance(repository, PrismaUserRepository)

    def test_container_connects_once_and_disconnects_on_close(self, monkeypatch):
        client = FakePrismaClient()
        database = Database(client)
        monkeypatch.setattr(Database, "from_config", classmethod(lambda cls, config: database))

        async def scenario():
            container = create_container()
            await container.get(Database)
            await container.get(Database)
            assert client.connected
            await container.close()

        asyncio.run(scenario())

        assert client.connect_calls == 1
        assert client.disconnect_calls == 1
        assert not client.connected


class TestPrismaUserRepository:
    def test_create_and_find(self):
        repository = PrismaUserRepository(Database(FakePrismaClient()))

        async def scenario():
            created = await repository.create(
                NewUser(email="ada@example.com", user_name="ada", password_hash="h")
            )
            by_email = await repository.find_by_email("ADA@example.com")
            by_name = await repository.find_by_user_name("ada")
            missing = await repository.find_by_user_name("bob")
            return created, by_email, by_name, missing

        created, by_email, by_name, missing = asyncio.run(scenario())

        assert created.password_hash == "h"
        assert created.status.value == "REGISTERED"
        assert by_email.id == by_name.id == created.id
        assert missing is None

    def test_prisma_errors_become_database_errors(self):
        from prisma import errors as prisma_errors

        client = FakePrismaClient()
        client.user.error = prisma_errors.PrismaError("engine crashed")
        repository = PrismaUserRepository(Database(client))

        with pytest.raises(DatabaseError) as exc_info:
            asyncio.run(repository.find_by_email("ada@example.com"))

        assert exc_info.value.status_code == 500
        assert exc_info.value.extensions["code"] == "DATABASE_ERROR"
