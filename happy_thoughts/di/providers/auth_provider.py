from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth import (
    GetCurrentUserUseCase,
    ListUsersUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer

# Every credential use case is built from the user repository alone
CREDENTIAL_USE_CASES = (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    ListUsersUseCase,
)


class AuthProvider:
    """Credential use case provider - registration, login, token resolution and the user list"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the credential use cases as factories over UserRepository.
        The repository is resolved at build time so tests can swap it in.
        """
        for use_case_class in CREDENTIAL_USE_CASES:
            container.register_factory(
                use_case_class,
                lambda use_case_class=use_case_class: use_case_class(
                    user_repository=container.get(UserRepository)
                )
            )
