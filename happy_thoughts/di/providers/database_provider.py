from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB connection and its collections.
        This is the ONLY place where database connections are created.
        """
        if not container.is_registered(MongoConnection):
            container.register_singleton(
                MongoConnection,
                MongoConnection(settings=container.get(Settings)),
            )
        connection: MongoConnection = container.get(MongoConnection)
        
        container.register_singleton("user_collection", connection.get_user_collection())
        container.register_singleton("thought_collection", connection.get_thought_collection())
