"""
Unit tests for the dependency injection container wiring.
"""

import pytest

from happy_thoughts.application.use_cases.auth import GetCurrentUserUseCase, RegisterUserUseCase
from happy_thoughts.application.use_cases.thought import CreateThoughtUseCase, ListRecentThoughtsUseCase
from happy_thoughts.core.config import Settings
from happy_thoughts.di.base_container import BaseContainer
from happy_thoughts.di.container import DIContainer
from happy_thoughts.domain.repositories.thought_repository import ThoughtRepository
from happy_thoughts.domain.repositories.user_repository import UserRepository
from happy_thoughts.infrastructure.db.mongo_connection import MongoConnection
from happy_thoughts.infrastructure.db.mongo_thought_repository import MongoThoughtRepository
from happy_thoughts.infrastructure.db.mongo_user_repository import MongoUserRepository

class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_new_instance_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_missing_key_raises(self):
        with pytest.raises(ValueError, match="No dependency registered"):
            BaseContainer().get(UserRepository)

class TestDIContainer:
    """Tests for DIContainer composition"""

    def test_wires_mongo_repositories_and_use_cases(self, mock_env):
        container = DIContainer(settings=Settings())

        assert isinstance(container.get(MongoConnection), MongoConnection)
        assert isinstance(container.get(UserRepository), MongoUserRepository)
        assert isinstance(container.get(ThoughtRepository), MongoThoughtRepository)
        assert isinstance(container.get(RegisterUserUseCase), RegisterUserUseCase)
        assert isinstance(container.get(GetCurrentUserUseCase), GetCurrentUserUseCase)
        assert container.get(ListRecentThoughtsUseCase).page_size == 20

    def test_thought_rules_come_from_settings(self, mock_env, monkeypatch):
        monkeypatch.setenv("MESSAGE_MIN_LENGTH", "3")
        monkeypatch.setenv("MESSAGE_MAX_LENGTH", "50")
        container = DIContainer(settings=Settings())

        use_case = container.get(CreateThoughtUseCase)
        assert (use_case.min_length, use_case.max_length) == (3, 50)
