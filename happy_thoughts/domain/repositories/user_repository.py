from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass
    
    @abstractmethod
    async def find_by_access_token(self, access_token: str) -> Optional[User]:
        """Find user owning the given access token"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """List every user"""
        pass
    
    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user.
        
        Raises ConflictError if the username is already taken.
        """
        pass
