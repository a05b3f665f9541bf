# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING, ReturnDocument

# Local application imports
from ...domain.repositories.thought_repository import ThoughtRepository
from ...domain.models.thought import Thought
from ...domain.constants import ThoughtFields
from ...domain.exceptions import DataAccessError, HappyThoughtsError
from ...utils.datetime_utils import ensure_utc, utc_now
from .object_ids import parse_object_id, reference_from_store, reference_to_store

logger = logging.getLogger(__name__)

# Default store order for random sampling: insertion order
NATURAL_ORDER = [(ThoughtFields.MONGO_ID, ASCENDING)]
NEWEST_FIRST = [(ThoughtFields.CREATED_AT, DESCENDING)]
MOST_LIKED_FIRST = [
    (ThoughtFields.HEARTS, DESCENDING),
    (ThoughtFields.CREATED_AT, DESCENDING),
]


class MongoThoughtRepository(ThoughtRepository):
    """MongoDB implementation of ThoughtRepository"""
    
    def __init__(self, thought_collection: AsyncIOMotorCollection) -> None:
        self.thought_collection = thought_collection
    
    async def find_by_id(self, thought_id: str) -> Optional[Thought]:
        """
        Find thought by ID
        
        Args:
            thought_id: The thought ID to find
            
        Returns:
            Thought domain model if found, None otherwise
        """
        object_id = parse_object_id(thought_id)
        
        try:
            document = await self.thought_collection.find_one({ThoughtFields.MONGO_ID: object_id})
        except Exception as e:
            raise DataAccessError(f"Error finding thought by ID: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_thought(document)
    
    async def find_recent(self, limit: int) -> List[Thought]:
        cursor = self.thought_collection.find({}).sort(NEWEST_FIRST).limit(limit)
        return await self._collect(cursor, "listing recent thoughts")
    
    async def find_most_liked(self) -> List[Thought]:
        cursor = self.thought_collection.find({}).sort(MOST_LIKED_FIRST)
        return await self._collect(cursor, "listing thoughts by hearts")
    
    async def find_liked_by(self, user_id: str) -> List[Thought]:
        """
        Find all thoughts liked by a user, in store order
        
        Args:
            user_id: The liking user's ID
            
        Returns:
            List of Thought domain models
        """
        if not user_id:
            return []
        
        cursor = self.thought_collection.find(
            {ThoughtFields.LIKED_BY: reference_to_store(user_id)}
        )
        return await self._collect(cursor, "listing liked thoughts")
    
    async def count(self) -> int:
        try:
            return await self.thought_collection.count_documents({})
        except Exception as e:
            raise DataAccessError(f"Error counting thoughts: {str(e)}")
    
    async def find_at_offset(self, offset: int) -> Optional[Thought]:
        try:
            document = await self.thought_collection.find_one(
                {}, sort=NATURAL_ORDER, skip=offset
            )
        except Exception as e:
            raise DataAccessError(f"Error fetching thought at offset {offset}: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_thought(document)
    
    async def create(self, thought: Thought) -> Thought:
        """
        Insert a new thought
        
        Args:
            thought: Thought domain model without an ID
            
        Returns:
            Saved Thought domain model with ID set
        """
        thought_dict = self._thought_to_dict(thought)
        
        try:
            result = await self.thought_collection.insert_one(thought_dict)
            new_document = await self.thought_collection.find_one(
                {ThoughtFields.MONGO_ID: result.inserted_id}
            )
        except Exception as e:
            raise DataAccessError(f"Error saving thought: {str(e)}")
        
        if new_document is None:
            raise DataAccessError("Thought was created but could not be retrieved")
        return self._document_to_thought(new_document)
    
    async def update_message(self, thought_id: str, message: str) -> Optional[Thought]:
        object_id = parse_object_id(thought_id)
        
        try:
            document = await self.thought_collection.find_one_and_update(
                {ThoughtFields.MONGO_ID: object_id},
                {"$set": {ThoughtFields.MESSAGE: message}},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise DataAccessError(f"Error updating thought {thought_id}: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_thought(document)
    
    async def delete(self, thought_id: str) -> Optional[Thought]:
        object_id = parse_object_id(thought_id)
        
        try:
            document = await self.thought_collection.find_one_and_delete(
                {ThoughtFields.MONGO_ID: object_id}
            )
        except Exception as e:
            raise DataAccessError(f"Error deleting thought {thought_id}: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_thought(document)
    
    async def add_like(self, thought_id: str, user_id: str) -> Optional[Thought]:
        """
        Add a like in a single conditional update
        
        The filter only matches while the user is absent from likedBy, so
        concurrent likes from the same user increment hearts at most once.
        
        Args:
            thought_id: The thought being liked
            user_id: The liking user's ID
            
        Returns:
            Updated Thought, or None if the thought is missing or already liked
        """
        object_id = parse_object_id(thought_id)
        liker = reference_to_store(user_id)
        
        try:
            document = await self.thought_collection.find_one_and_update(
                {ThoughtFields.MONGO_ID: object_id, ThoughtFields.LIKED_BY: {"$ne": liker}},
                {
                    "$addToSet": {ThoughtFields.LIKED_BY: liker},
                    "$inc": {ThoughtFields.HEARTS: 1},
                },
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise DataAccessError(f"Error liking thought {thought_id}: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_thought(document)
    
    async def _collect(self, cursor, action: str) -> List[Thought]:
        try:
            thoughts = []
            async for document in cursor:
                thoughts.append(self._document_to_thought(document))
            return thoughts
        except HappyThoughtsError:
            raise
        except Exception as e:
            raise DataAccessError(f"Error {action}: {str(e)}")
    
    def _document_to_thought(self, document: Dict[str, Any]) -> Thought:
        """
        Convert MongoDB document to Thought domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Thought domain model
        """
        if not document or ThoughtFields.MONGO_ID not in document:
            raise DataAccessError("Invalid thought document: missing _id field")
        
        user_id = document.get(ThoughtFields.USER_ID)
        
        return Thought(
            id=str(document[ThoughtFields.MONGO_ID]),
            message=document.get(ThoughtFields.MESSAGE, ""),
            hearts=int(document.get(ThoughtFields.HEARTS, 0) or 0),
            created_at=ensure_utc(document.get(ThoughtFields.CREATED_AT)) or utc_now(),
            username=document.get(ThoughtFields.USERNAME),
            user_id=reference_from_store(user_id) if user_id is not None else None,
            liked_by=[
                reference_from_store(liker)
                for liker in document.get(ThoughtFields.LIKED_BY, [])
            ],
        )
    
    def _thought_to_dict(self, thought: Thought) -> Dict[str, Any]:
        """
        Convert Thought domain model to MongoDB document
        
        Args:
            thought: Thought domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        thought_dict: Dict[str, Any] = {
            ThoughtFields.MESSAGE: thought.message,
            ThoughtFields.HEARTS: thought.hearts,
            ThoughtFields.CREATED_AT: thought.created_at,
            ThoughtFields.LIKED_BY: [reference_to_store(liker) for liker in thought.liked_by],
        }
        
        if thought.username is not None:
            thought_dict[ThoughtFields.USERNAME] = thought.username
        if thought.user_id is not None:
            thought_dict[ThoughtFields.USER_ID] = reference_to_store(thought.user_id)
        
        return thought_dict
