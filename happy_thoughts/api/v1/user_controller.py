# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.user_dto import UserResponse, SecretResponse
from ...application.use_cases.auth.list_users import ListUsersUseCase
from ...domain.exceptions import HappyThoughtsError
from ...di.container import get_container
from .dependencies import get_current_user
from .error_handlers import to_http_exception


router = APIRouter(tags=["users"])

SECRET_MESSAGE = "This is a super secret message"


@router.get("/users", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """
    List all registered users (without password hashes or tokens)
    
    Returns:
        List of UserResponse objects
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    try:
        return await list_users_use_case.execute()
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


@router.get("/secrets", response_model=SecretResponse)
async def get_secrets(
    current_user: UserResponse = Depends(get_current_user),
) -> SecretResponse:
    """Static payload only reachable with a valid access token"""
    return SecretResponse(secret=SECRET_MESSAGE)
