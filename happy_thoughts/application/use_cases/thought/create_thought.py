# Standard library imports
import logging

# Local application imports
from ....domain.repositories.thought_repository import ThoughtRepository
from ....domain.models.thought import Thought, validate_message, MESSAGE_MIN_LENGTH, MESSAGE_MAX_LENGTH
from ....utils.datetime_utils import utc_now
from ...dto.thought_dto import ThoughtMessageRequest, ThoughtResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class CreateThoughtUseCase:
    """Use case for posting a new thought"""
    
    def __init__(
        self,
        thought_repository: ThoughtRepository,
        min_length: int = MESSAGE_MIN_LENGTH,
        max_length: int = MESSAGE_MAX_LENGTH,
    ) -> None:
        self.thought_repository = thought_repository
        self.min_length = min_length
        self.max_length = max_length
    
    async def execute(self, request: ThoughtMessageRequest, caller: UserResponse) -> ThoughtResponse:
        """
        Create a thought owned by the caller
        
        Args:
            request: Thought creation request
            caller: Authenticated user posting the thought
            
        Returns:
            ThoughtResponse with created thought information
            
        Raises:
            InvalidArgumentError: If the message is missing or out of range
        """
        message = validate_message(request.message, self.min_length, self.max_length)
        
        new_thought = Thought(
            id=None,  # Will be set by repository
            message=message,
            created_at=utc_now(),
            hearts=0,
            username=caller.username,
            user_id=caller.id,
            liked_by=[],
        )
        
        saved_thought = await self.thought_repository.create(new_thought)
        logger.info(f"User {caller.id} posted thought {saved_thought.id}")
        
        return ThoughtResponse.from_domain(saved_thought)
