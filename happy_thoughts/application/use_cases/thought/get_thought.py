# Local application imports
from ....domain.repositories.thought_repository import ThoughtRepository
from ....domain.exceptions import NotFoundError
from ...dto.thought_dto import ThoughtResponse


class GetThoughtUseCase:
    """Use case for getting a thought by ID"""
    
    def __init__(self, thought_repository: ThoughtRepository) -> None:
        self.thought_repository = thought_repository
    
    async def execute(self, thought_id: str) -> ThoughtResponse:
        """
        Get a thought by ID
        
        Args:
            thought_id: ID of the thought
            
        Returns:
            ThoughtResponse with thought information
            
        Raises:
            InvalidArgumentError: If the ID is malformed
            NotFoundError: If the thought does not exist
        """
        thought = await self.thought_repository.find_by_id(thought_id)
        if thought is None:
            raise NotFoundError("Thought not found", details={"id": thought_id})
        
        return ThoughtResponse.from_domain(thought)
