# Standard library imports
import logging

# Local application imports
from ....domain.repositories.thought_repository import ThoughtRepository
from ....domain.models.thought import validate_message, MESSAGE_MIN_LENGTH, MESSAGE_MAX_LENGTH
from ....domain.exceptions import ForbiddenError, NotFoundError
from ...dto.thought_dto import ThoughtMessageRequest, ThoughtMutationResponse, ThoughtResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class UpdateThoughtUseCase:
    """Use case for editing the message of a thought"""
    
    def __init__(
        self,
        thought_repository: ThoughtRepository,
        min_length: int = MESSAGE_MIN_LENGTH,
        max_length: int = MESSAGE_MAX_LENGTH,
    ) -> None:
        self.thought_repository = thought_repository
        self.min_length = min_length
        self.max_length = max_length
    
    async def execute(
        self,
        thought_id: str,
        request: ThoughtMessageRequest,
        caller: UserResponse,
    ) -> ThoughtMutationResponse:
        """
        Replace the message of a thought owned by the caller (or ownerless)
        
        Args:
            thought_id: ID of the thought
            request: New message
            caller: Authenticated user
            
        Returns:
            ThoughtMutationResponse with the updated thought
            
        Raises:
            InvalidArgumentError: If the ID or the new message is invalid
            NotFoundError: If the thought does not exist
            ForbiddenError: If another user owns the thought
        """
        thought = await self.thought_repository.find_by_id(thought_id)
        if thought is None:
            raise NotFoundError("Thought not found", details={"id": thought_id})
        
        if not thought.can_be_modified_by(caller.id):
            logger.warning(f"User {caller.id} tried to edit thought {thought_id} owned by {thought.user_id}")
            raise ForbiddenError("You can only edit your own thoughts")
        
        message = validate_message(request.message, self.min_length, self.max_length)
        
        updated = await self.thought_repository.update_message(thought_id, message)
        if updated is None:
            raise NotFoundError("Thought not found", details={"id": thought_id})
        
        return ThoughtMutationResponse(
            message="Thought updated",
            thought=ThoughtResponse.from_domain(updated),
        )
