# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import Settings, get_settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
THOUGHTS_COLLECTION = "thoughts"


class MongoConnection:
    """
    Owns the MongoDB client for the lifetime of the application.
    
    Created once by the DI container and handed to repositories through
    their collections, so no module reaches for a global handle.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[AsyncIOMotorClient] = None,
    ) -> None:
        settings = settings or get_settings()
        self.client = client if client is not None else AsyncIOMotorClient(settings.mongo_uri)
        self.database: AsyncIOMotorDatabase = self.client[settings.mongo_database_name]
    
    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB
        
        Returns:
            MongoDB collection for users
        """
        return self.database[USERS_COLLECTION]
    
    def get_thought_collection(self) -> AsyncIOMotorCollection:
        """
        Get thoughts collection from MongoDB
        
        Returns:
            MongoDB collection for thoughts
        """
        return self.database[THOUGHTS_COLLECTION]
    
    async def ensure_indexes(self) -> None:
        """Create the unique username index backing registration conflicts"""
        await self.get_user_collection().create_index(
            [(UserFields.USERNAME, ASCENDING)],
            unique=True,
        )
        logger.info("MongoDB indexes ensured")
    
    def close(self) -> None:
        self.client.close()
        logger.info("MongoDB client closed")
