# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UnauthenticatedError
from ....core.security import verify_password
from ...dto.auth_dto import CredentialsRequest, AuthResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class LoginUserUseCase:
    """Use case for authenticating a user and returning their access token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: CredentialsRequest) -> AuthResponse:
        """
        Authenticate user
        
        The token issued at registration is returned unchanged.
        
        Args:
            request: Login request with username and password
            
        Returns:
            AuthResponse with the user's ID and access token
            
        Raises:
            UnauthenticatedError: If the user is unknown or the password is wrong
        """
        if not request.username or not request.password:
            raise UnauthenticatedError(INVALID_CREDENTIALS)
        
        user = await self.user_repository.find_by_username(request.username)
        if user is None or not verify_password(request.password, user.hashed_password):
            logger.warning(f"Failed login attempt for username {request.username!r}")
            raise UnauthenticatedError(INVALID_CREDENTIALS)
        
        return AuthResponse(
            id=user.id or "",
            access_token=user.access_token,
        )
