"""
Shared pytest fixtures for happy_thoughts tests.
"""
import os

# Cheap bcrypt work factor for tests; read when settings are first built
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from happy_thoughts.application.dto.user_dto import UserResponse
from happy_thoughts.core.config import Settings
from happy_thoughts.di.base_container import BaseContainer
from happy_thoughts.di.providers import AuthProvider, ThoughtProvider
from happy_thoughts.domain.repositories.thought_repository import ThoughtRepository
from happy_thoughts.domain.repositories.user_repository import UserRepository
from happy_thoughts.infrastructure.db.mongo_connection import MongoConnection

from .fakes import InMemoryThoughtRepository, InMemoryUserRepository

# Modules that call get_container at request time
CONTAINER_USE_SITES = (
    "happy_thoughts.main.get_container",
    "happy_thoughts.api.v1.dependencies.get_container",
    "happy_thoughts.api.v1.auth_controller.get_container",
    "happy_thoughts.api.v1.thought_controller.get_container",
    "happy_thoughts.api.v1.user_controller.get_container",
)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_happythoughts",
        "THOUGHTS_PAGE_SIZE": "20",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.access_token_bytes = 128
    mock.bcrypt_rounds = 4

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("happy_thoughts.core.config.get_settings", return_value=mock), patch(
        "happy_thoughts.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def caller():
    return UserResponse(id="665f1c2e9b1e8a3d4c5b6a01", username="ada")


@pytest.fixture
def other_caller():
    return UserResponse(id="665f1c2e9b1e8a3d4c5b6a02", username="grace")


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def thought_repo():
    return InMemoryThoughtRepository()


@pytest.fixture
def test_container(user_repo, thought_repo):
    """Container wired with the real providers on top of in-memory repositories."""
    container = BaseContainer()
    container.register_singleton(Settings, Settings())

    connection = MagicMock(spec=MongoConnection)
    connection.ensure_indexes = AsyncMock()
    container.register_singleton(MongoConnection, connection)

    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(ThoughtRepository, thought_repo)
    AuthProvider.register(container)
    ThoughtProvider.register(container)
    return container


@pytest.fixture
def client(test_container):
    """TestClient over the full app with the test container patched in."""
    from contextlib import ExitStack

    from fastapi.testclient import TestClient

    from happy_thoughts.main import app

    with ExitStack() as stack:
        for target in CONTAINER_USE_SITES:
            stack.enter_context(patch(target, return_value=test_container))
        with TestClient(app) as c:
            yield c
