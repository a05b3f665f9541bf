from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    ListUsersUseCase,
)
from .thought import (
    ListRecentThoughtsUseCase,
    ListPopularThoughtsUseCase,
    GetRandomThoughtUseCase,
    GetThoughtUseCase,
    CreateThoughtUseCase,
    UpdateThoughtUseCase,
    DeleteThoughtUseCase,
    LikeThoughtUseCase,
    ListLikedThoughtsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ListUsersUseCase",
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
