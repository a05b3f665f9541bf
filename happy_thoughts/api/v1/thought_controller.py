# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.thought_dto import ThoughtMessageRequest, ThoughtResponse, ThoughtMutationResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.thought.list_recent_thoughts import ListRecentThoughtsUseCase
from ...application.use_cases.thought.list_popular_thoughts import ListPopularThoughtsUseCase
from ...application.use_cases.thought.get_random_thought import GetRandomThoughtUseCase
from ...application.use_cases.thought.get_thought import GetThoughtUseCase
from ...application.use_cases.thought.create_thought import CreateThoughtUseCase
from ...application.use_cases.thought.update_thought import UpdateThoughtUseCase
from ...application.use_cases.thought.delete_thought import DeleteThoughtUseCase
from ...application.use_cases.thought.like_thought import LikeThoughtUseCase
from ...application.use_cases.thought.list_liked_thoughts import ListLikedThoughtsUseCase
from ...domain.exceptions import HappyThoughtsError
from ...di.container import get_container
from .dependencies import get_current_user
from .error_handlers import to_http_exception


router = APIRouter(tags=["thoughts"])


@router.get("", response_model=List[ThoughtResponse])
async def list_recent_thoughts() -> List[ThoughtResponse]:
    """
    List the newest thoughts (at most one page)
    
    Returns:
        List of ThoughtResponse objects, newest first
    """
    container = get_container()
    list_recent_use_case = container.get(ListRecentThoughtsUseCase)
    
    try:
        return await list_recent_use_case.execute()
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


# Literal sub-paths are declared before /{thought_id} so they are not captured by it


@router.get("/random", response_model=ThoughtResponse)
async def get_random_thought() -> ThoughtResponse:
    container = get_container()
    random_use_case = container.get(GetRandomThoughtUseCase)
    
    try:
        return await random_use_case.execute()
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


@router.get("/popular", response_model=List[ThoughtResponse])
async def list_popular_thoughts() -> List[ThoughtResponse]:
    """
    List all thoughts sorted by hearts, most liked first
    
    Returns:
        List of ThoughtResponse objects
    """
    container = get_container()
    popular_use_case = container.get(ListPopularThoughtsUseCase)
    
    try:
        return await popular_use_case.execute()
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


@router.get("/likes", response_model=List[ThoughtResponse])
async def list_liked_thoughts(
    current_user: UserResponse = Depends(get_current_user),
) -> List[ThoughtResponse]:
    """
    List the thoughts the current user has liked
    
    Args:
        current_user: Current authenticated user (from dependency)
        
    Returns:
        List of ThoughtResponse objects
    """
    container = get_container()
    liked_use_case = container.get(ListLikedThoughtsUseCase)
    
    try:
        return await liked_use_case.execute(current_user)
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


@router.get("/{thought_id}", response_model=ThoughtResponse)
async def get_thought(thought_id: str) -> ThoughtResponse:
    """
    Get a thought by ID
    
    Args:
        thought_id: ID of the thought
        
    Returns:
        ThoughtResponse with thought information
    """
    container = get_container()
    get_thought_use_case = container.get(GetThoughtUseCase)
    
    try:
        return await get_thought_use_case.execute(thought_id)
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


@router.post("", response_model=ThoughtResponse, status_code=status.HTTP_201_CREATED)
async def create_thought(
    request: ThoughtMessageRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ThoughtResponse:
    """
    Post a new thought as the current user
    
    Args:
        request: Thought creation request
        current_user: Current authenticated user (from dependency)
        
    Returns:
        ThoughtResponse with created thought information
    """
    container = get_container()
    create_thought_use_case = container.get(CreateThoughtUseCase)
    
    try:
        return await create_thought_use_case.execute(request, current_user)
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


@router.put("/{thought_id}", response_model=ThoughtMutationResponse)
async def update_thought(
    thought_id: str,
    request: ThoughtMessageRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ThoughtMutationResponse:
    """
    Edit the message of a thought
    
    Args:
        thought_id: ID of the thought
        request: New message
        current_user: Current authenticated user (from dependency)
        
    Returns:
        ThoughtMutationResponse with the updated thought
    """
    container = get_container()
    update_thought_use_case = container.get(UpdateThoughtUseCase)
    
    try:
        return await update_thought_use_case.execute(thought_id, request, current_user)
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


@router.delete("/{thought_id}", response_model=ThoughtMutationResponse)
async def delete_thought(
    thought_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> ThoughtMutationResponse:
    container = get_container()
    delete_thought_use_case = container.get(DeleteThoughtUseCase)
    
    try:
        return await delete_thought_use_case.execute(thought_id, current_user)
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)


@router.post("/{thought_id}/likes", response_model=ThoughtResponse)
async def like_thought(
    thought_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> ThoughtResponse:
    """
    Like a thought; repeated likes by the same user change nothing
    
    Args:
        thought_id: ID of the thought
        current_user: Current authenticated user (from dependency)
        
    Returns:
        ThoughtResponse with current hearts and likedBy
    """
    container = get_container()
    like_thought_use_case = container.get(LikeThoughtUseCase)
    
    try:
        return await like_thought_use_case.execute(thought_id, current_user)
    except HappyThoughtsError as exception:
        raise to_http_exception(exception)
