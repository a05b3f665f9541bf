# Standard library imports
from typing import Optional

# External package imports
from fastapi import HTTPException, Security
from fastapi.security import APIKeyHeader

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...domain.exceptions import HappyThoughtsError
from ...di.container import get_container
from .error_handlers import to_http_exception


# Raw token or "Bearer <token>", so HTTPBearer's scheme check does not fit
access_token_header = APIKeyHeader(name="Authorization", auto_error=False)


async def get_current_user(
    authorization: Optional[str] = Security(access_token_header),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from the access token
    
    Args:
        authorization: Authorization header value
        
    Returns:
        UserResponse with user information
        
    Raises:
        HTTPException: 401 if the token is missing or unknown
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    
    try:
        return await get_current_user_use_case.execute(authorization)
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)
