# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.auth_dto import CredentialsRequest, AuthResponse, AuthFailureResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...domain.exceptions import HappyThoughtsError
from ...di.container import get_container
from .error_handlers import to_http_exception


router = APIRouter(tags=["authentication"])

CREDENTIAL_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": AuthFailureResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": AuthFailureResponse},
}


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CREDENTIAL_ERRORS,
)
async def register_user(request: CredentialsRequest) -> AuthResponse:
    """
    Register a new user
    
    Args:
        request: Username and password
        
    Returns:
        AuthResponse with the new user's ID and access token
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    
    try:
        return await register_use_case.execute(request)
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


@router.post("/login", response_model=AuthResponse, responses=CREDENTIAL_ERRORS)
async def login_user(request: CredentialsRequest) -> AuthResponse:
    """
    Authenticate user and get their access token
    
    Args:
        request: Username and password
        
    Returns:
        AuthResponse with the user's ID and access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    try:
        return await login_use_case.execute(request)
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)
