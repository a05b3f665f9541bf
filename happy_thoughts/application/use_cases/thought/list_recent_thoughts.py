# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.thought_repository import ThoughtRepository
from ...dto.thought_dto import ThoughtResponse

DEFAULT_PAGE_SIZE = 20


class ListRecentThoughtsUseCase:
    """Use case for listing the newest thoughts"""
    
    def __init__(self, thought_repository: ThoughtRepository, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.thought_repository = thought_repository
        self.page_size = page_size
    
    async def execute(self) -> List[ThoughtResponse]:
        """
        List up to ``page_size`` thoughts, newest first
        
        Returns:
            List of ThoughtResponse objects (possibly empty)
        """
        thoughts = await self.thought_repository.find_recent(self.page_size)
        return [ThoughtResponse.from_domain(thought) for thought in thoughts[: self.page_size]]
