from .user_repository import UserRepository
from .thought_repository import ThoughtRepository

__all__ = ["UserRepository", "ThoughtRepository"]
