# Standard library imports
import logging
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import ConflictError, DataAccessError, HappyThoughtsError

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username
        
        Args:
            username: Username to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except Exception as e:
            raise DataAccessError(f"Error finding user by username: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_access_token(self, access_token: str) -> Optional[User]:
        """
        Find the user owning an access token
        
        Args:
            access_token: Bearer token presented by a client
            
        Returns:
            User domain model if found, None otherwise
        """
        if not access_token:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.ACCESS_TOKEN: access_token})
        except Exception as e:
            raise DataAccessError(f"Error finding user by access token: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_all(self) -> List[User]:
        try:
            users = []
            async for document in self.user_collection.find({}):
                users.append(self._document_to_user(document))
            return users
        except HappyThoughtsError:
            raise
        except Exception as e:
            raise DataAccessError(f"Error listing users: {str(e)}")
    
    async def create(self, user: User) -> User:
        """
        Insert a new user
        
        Args:
            user: User domain model without an ID
            
        Returns:
            Saved User domain model with ID set
            
        Raises:
            ConflictError: If the username is already taken
        """
        user_dict = self._user_to_dict(user)
        
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError:
            raise ConflictError(
                "Username already exists",
                details={UserFields.USERNAME: user.username},
            )
        except Exception as e:
            raise DataAccessError(f"Error saving user: {str(e)}")
        
        user.id = str(result.inserted_id)
        return user
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise DataAccessError("Invalid user document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            access_token=document.get(UserFields.ACCESS_TOKEN, ""),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        return {
            UserFields.USERNAME: user.username,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.ACCESS_TOKEN: user.access_token,
        }
