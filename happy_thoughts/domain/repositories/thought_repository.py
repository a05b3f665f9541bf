from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.thought import Thought


class ThoughtRepository(ABC):
    """
    Repository interface - defines contract for thought data access.
    
    Methods taking a ``thought_id`` raise InvalidArgumentError when the
    identifier is not in a valid format.
    """
    
    @abstractmethod
    async def find_by_id(self, thought_id: str) -> Optional[Thought]:
        """Find thought by ID"""
        pass
    
    @abstractmethod
    async def find_recent(self, limit: int) -> List[Thought]:
        """Newest thoughts first, at most ``limit``"""
        pass
    
    @abstractmethod
    async def find_most_liked(self) -> List[Thought]:
        """All thoughts, most hearts first (ties: newest first)"""
        pass
    
    @abstractmethod
    async def find_liked_by(self, user_id: str) -> List[Thought]:
        """All thoughts liked by the given user"""
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Number of stored thoughts"""
        pass
    
    @abstractmethod
    async def find_at_offset(self, offset: int) -> Optional[Thought]:
        """Thought at ``offset`` in default store order"""
        pass
    
    @abstractmethod
    async def create(self, thought: Thought) -> Thought:
        """Insert a new thought and return it with its ID set"""
        pass
    
    @abstractmethod
    async def update_message(self, thought_id: str, message: str) -> Optional[Thought]:
        """Replace the message; returns the updated thought or None if absent"""
        pass
    
    @abstractmethod
    async def delete(self, thought_id: str) -> Optional[Thought]:
        """Remove the thought; returns the deleted thought or None if absent"""
        pass
    
    @abstractmethod
    async def add_like(self, thought_id: str, user_id: str) -> Optional[Thought]:
        """
        Atomically add ``user_id`` to likedBy and increment hearts, only if
        the user has not liked it yet.
        
        Returns the updated thought, or None if nothing was modified
        (thought missing or already liked by the user).
        """
        pass
