# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.thought_repository import ThoughtRepository
from ...dto.thought_dto import ThoughtResponse
from ...dto.user_dto import UserResponse


class ListLikedThoughtsUseCase:
    """Use case for listing the thoughts the caller has liked"""
    
    def __init__(self, thought_repository: ThoughtRepository) -> None:
        self.thought_repository = thought_repository
    
    async def execute(self, caller: UserResponse) -> List[ThoughtResponse]:
        thoughts = await self.thought_repository.find_liked_by(caller.id)
        return [ThoughtResponse.from_domain(thought) for thought in thoughts]
