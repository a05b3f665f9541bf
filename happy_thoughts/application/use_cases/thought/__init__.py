from .list_recent_thoughts import ListRecentThoughtsUseCase
from .list_popular_thoughts import ListPopularThoughtsUseCase
from .get_random_thought import GetRandomThoughtUseCase
from .get_thought import GetThoughtUseCase
from .create_thought import CreateThoughtUseCase
from .update_thought import UpdateThoughtUseCase
from .delete_thought import DeleteThoughtUseCase
from .like_thought import LikeThoughtUseCase
from .list_liked_thoughts import ListLikedThoughtsUseCase

__all__ = [
    "ListRecentThoughtsUseCase",
    "ListPopularThoughtsUseCase",
    "GetRandomThoughtUseCase",
    "GetThoughtUseCase",
    "CreateThoughtUseCase",
    "UpdateThoughtUseCase",
    "DeleteThoughtUseCase",
    "LikeThoughtUseCase",
    "ListLikedThoughtsUseCase",
]
