# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.thought_repository import ThoughtRepository
from ...dto.thought_dto import ThoughtResponse


class ListPopularThoughtsUseCase:
    """Use case for listing thoughts by hearts, most liked first"""
    
    def __init__(self, thought_repository: ThoughtRepository) -> None:
        self.thought_repository = thought_repository
    
    async def execute(self) -> List[ThoughtResponse]:
        thoughts = await self.thought_repository.find_most_liked()
        return [ThoughtResponse.from_domain(thought) for thought in thoughts]
