# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UnauthenticatedError
from ....core.security import extract_access_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for resolving the caller from the Authorization header"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, authorization: Optional[str]) -> UserResponse:
        """
        Resolve an access token to a user
        
        Args:
            authorization: Authorization header value, raw token or "Bearer <token>"
            
        Returns:
            UserResponse with user information
            
        Raises:
            UnauthenticatedError: If no token was supplied or no user owns it
        """
        token = extract_access_token(authorization)
        if token is None:
            raise UnauthenticatedError("Access token missing")
        
        user = await self.user_repository.find_by_access_token(token)
        if user is None:
            raise UnauthenticatedError("Invalid access token")
        
        return UserResponse(
            id=user.id or "",
            username=user.username,
        )
