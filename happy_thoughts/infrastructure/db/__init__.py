from .mongo_connection import MongoConnection
from .mongo_user_repository import MongoUserRepository
from .mongo_thought_repository import MongoThoughtRepository
from .seed import reset_thoughts

__all__ = [
    "MongoConnection",
    "MongoUserRepository",
    "MongoThoughtRepository",
    "reset_thoughts",
]
