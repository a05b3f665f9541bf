# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ConflictError, InvalidArgumentError
from ....core.security import hash_password, generate_access_token
from ...dto.auth_dto import CredentialsRequest, AuthResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: CredentialsRequest) -> AuthResponse:
        """
        Register a new user
        
        Args:
            request: Registration request with username and password
            
        Returns:
            AuthResponse with the new user's ID and access token
            
        Raises:
            InvalidArgumentError: If username or password is missing
            ConflictError: If the username is already taken
        """
        if not request.username or not request.password:
            raise InvalidArgumentError("Username and password are required")
        
        # Check if user already exists; the unique index catches the race
        existing_user = await self.user_repository.find_by_username(request.username)
        if existing_user is not None:
            raise ConflictError("Username already exists")
        
        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            hashed_password=hash_password(request.password),
            access_token=generate_access_token(),
        )
        
        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.username} ({saved_user.id})")
        
        return AuthResponse(
            id=saved_user.id or "",
            access_token=saved_user.access_token,
        )
