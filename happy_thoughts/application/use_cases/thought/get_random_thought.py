# Standard library imports
import random
from typing import Callable, Optional

# Local application imports
from ....domain.repositories.thought_repository import ThoughtRepository
from ....domain.exceptions import NotFoundError
from ...dto.thought_dto import ThoughtResponse


class GetRandomThoughtUseCase:
    """Use case for picking one thought uniformly at random"""
    
    def __init__(
        self,
        thought_repository: ThoughtRepository,
        choose_offset: Optional[Callable[[int], int]] = None,
    ) -> None:
        self.thought_repository = thought_repository
        # Returns an int in [0, count)
        self.choose_offset = choose_offset or random.randrange
    
    async def execute(self) -> ThoughtResponse:
        """
        Count the thoughts, draw an offset and fetch the thought at it
        
        Returns:
            ThoughtResponse for the sampled thought
            
        Raises:
            NotFoundError: If there are no thoughts
        """
        count = await self.thought_repository.count()
        if count == 0:
            raise NotFoundError("No thoughts")
        
        thought = await self.thought_repository.find_at_offset(self.choose_offset(count))
        if thought is None:
            # Collection shrank between count and fetch
            raise NotFoundError("No thoughts")
        
        return ThoughtResponse.from_domain(thought)
