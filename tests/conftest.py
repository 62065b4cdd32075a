import os
import tempfile

# Must be set before scaffold_api reads its configuration
os.environ["APP_ENV"] = "test"
os.environ["API_PREFIX"] = "v1"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="scaffold-api-logs-")

import pytest
from fastapi.testclient import TestClient

from scaffold_api.fastapi_app import create_fastapi_app
from scaffold_api.infrastructure.database import Database
from scaffold_api.setup.ioc import create_container

from fakes import FakeDatabaseProvider, FakePrismaClient, FakeSecurityProvider


@pytest.fixture()
def prisma_client():
    """Fake Prisma client shared by the whole app under test."""
    return FakePrismaClient()


@pytest.fixture()
def database(prisma_client):
    return Database(prisma_client)


@pytest.fixture()
def app(database):
    """Create a new FastAPI app wired to the fake database for each test."""
    container = create_container(FakeDatabaseProvider(database), FakeSecurityProvider())
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app; runs startup and shutdown."""
    with TestClient(app) as test_client:
        yield test_client
