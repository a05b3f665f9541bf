# Standard library imports
import logging

# Local application imports
from ....domain.repositories.thought_repository import ThoughtRepository
from ....domain.exceptions import ForbiddenError, NotFoundError
from ...dto.thought_dto import ThoughtMutationResponse, ThoughtResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class DeleteThoughtUseCase:
    """Use case for permanently removing a thought"""
    
    def __init__(self, thought_repository: ThoughtRepository) -> None:
        self.thought_repository = thought_repository
    
    async def execute(self, thought_id: str, caller: UserResponse) -> ThoughtMutationResponse:
        """
        Delete a thought owned by the caller (or ownerless)
        
        Args:
            thought_id: ID of the thought
            caller: Authenticated user
            
        Returns:
            ThoughtMutationResponse with the deleted thought
            
        Raises:
            InvalidArgumentError: If the ID is malformed
            NotFoundError: If the thought does not exist
            ForbiddenError: If another user owns the thought
        """
        thought = await self.thought_repository.find_by_id(thought_id)
        if thought is None:
            raise NotFoundError("Thought not found", details={"id": thought_id})
        
        if not thought.can_be_modified_by(caller.id):
            logger.warning(f"User {caller.id} tried to delete thought {thought_id} owned by {thought.user_id}")
            raise ForbiddenError("You can only delete your own thoughts")
        
        deleted = await self.thought_repository.delete(thought_id)
        if deleted is None:
            raise NotFoundError("Thought not found", details={"id": thought_id})
        
        logger.info(f"User {caller.id} deleted thought {thought_id}")
        return ThoughtMutationResponse(
            message="Thought deleted",
            thought=ThoughtResponse.from_domain(deleted),
        )
