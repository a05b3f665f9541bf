# Standard library imports
import logging

# Local application imports
from ....domain.repositories.thought_repository import ThoughtRepository
from ....domain.exceptions import NotFoundError
from ...dto.thought_dto import ThoughtResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class LikeThoughtUseCase:
    """Use case for liking a thought; each user counts at most once"""
    
    def __init__(self, thought_repository: ThoughtRepository) -> None:
        self.thought_repository = thought_repository
    
    async def execute(self, thought_id: str, caller: UserResponse) -> ThoughtResponse:
        """
        Add the caller's like, or return the thought unchanged if already liked
        
        Args:
            thought_id: ID of the thought
            caller: Authenticated user
            
        Returns:
            ThoughtResponse with current hearts and likedBy
            
        Raises:
            InvalidArgumentError: If the ID is malformed
            NotFoundError: If the thought does not exist
        """
        thought = await self.thought_repository.find_by_id(thought_id)
        if thought is None:
            raise NotFoundError("Thought not found", details={"id": thought_id})
        
        if thought.is_liked_by(caller.id):
            return ThoughtResponse.from_domain(thought)
        
        liked = await self.thought_repository.add_like(thought_id, caller.id)
        if liked is None:
            # A concurrent like by the same user won, or the thought was deleted
            thought = await self.thought_repository.find_by_id(thought_id)
            if thought is None:
                raise NotFoundError("Thought not found", details={"id": thought_id})
            return ThoughtResponse.from_domain(thought)
        
        logger.info(f"User {caller.id} liked thought {thought_id}")
        return ThoughtResponse.from_domain(liked)
