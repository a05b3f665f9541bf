from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.thought_repository import ThoughtRepository
from ...application.use_cases.thought.list_recent_thoughts import ListRecentThoughtsUseCase
from ...application.use_cases.thought.list_popular_thoughts import ListPopularThoughtsUseCase
from ...application.use_cases.thought.get_random_thought import GetRandomThoughtUseCase
from ...application.use_cases.thought.get_thought import GetThoughtUseCase
from ...application.use_cases.thought.create_thought import CreateThoughtUseCase
from ...application.use_cases.thought.update_thought import UpdateThoughtUseCase
from ...application.use_cases.thought.delete_thought import DeleteThoughtUseCase
from ...application.use_cases.thought.like_thought import LikeThoughtUseCase
from ...application.use_cases.thought.list_liked_thoughts import ListLikedThoughtsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ThoughtProvider:
    """Thought use case provider - registers all thought-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all thought use cases.
        Use cases are created on-demand via factories.
        """
        settings: Settings = container.get(Settings)
        
        container.register_factory(
            ListRecentThoughtsUseCase,
            lambda: ListRecentThoughtsUseCase(
                thought_repository=container.get(ThoughtRepository),
                page_size=settings.thoughts_page_size,
            )
        )
        
        container.register_factory(
            ListPopularThoughtsUseCase,
            lambda: ListPopularThoughtsUseCase(
                thought_repository=container.get(ThoughtRepository)
            )
        )
        
        container.register_factory(
            GetRandomThoughtUseCase,
            lambda: GetRandomThoughtUseCase(
                thought_repository=container.get(ThoughtRepository)
            )
        )
        
        container.register_factory(
            GetThoughtUseCase,
            lambda: GetThoughtUseCase(
                thought_repository=container.get(ThoughtRepository)
            )
        )
        
        container.register_factory(
            CreateThoughtUseCase,
            lambda: CreateThoughtUseCase(
                thought_repository=container.get(ThoughtRepository),
                min_length=settings.message_min_length,
                max_length=settings.message_max_length,
            )
        )
        
        container.register_factory(
            UpdateThoughtUseCase,
            lambda: UpdateThoughtUseCase(
                thought_repository=container.get(ThoughtRepository),
                min_length=settings.message_min_length,
                max_length=settings.message_max_length,
            )
        )
        
        container.register_factory(
            DeleteThoughtUseCase,
            lambda: DeleteThoughtUseCase(
                thought_repository=container.get(ThoughtRepository)
            )
        )
        
        container.register_factory(
            LikeThoughtUseCase,
            lambda: LikeThoughtUseCase(
                thought_repository=container.get(ThoughtRepository)
            )
        )
        
        container.register_factory(
            ListLikedThoughtsUseCase,
            lambda: ListLikedThoughtsUseCase(
                thought_repository=container.get(ThoughtRepository)
            )
        )
