"""
Unit tests for auth use cases (Register, Login, GetCurrentUser, ListUsers).
"""
from unittest.mock import AsyncMock

import pytest
from happy_thoughts.core.security import hash_password
from happy_thoughts.application.use_cases.auth.login_user import LoginUserUseCase
from happy_thoughts.application.use_cases.auth.register_user import RegisterUserUseCase
from happy_thoughts.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from happy_thoughts.application.use_cases.auth.list_users import ListUsersUseCase
from happy_thoughts.application.dto.auth_dto import CredentialsRequest, AuthResponse
from happy_thoughts.domain.exceptions import ConflictError, InvalidArgumentError, UnauthenticatedError
from happy_thoughts.domain.models.user import User

TOKEN = "a1" * 128


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_username.return_value = None

        async def assign_id(user):
            user.id = "usr-new"
            return user

        mock_user_repo.create.side_effect = assign_id

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute(CredentialsRequest(username="ada", password="secret123"))

        assert isinstance(result, AuthResponse)
        assert result.success is True
        assert result.id == "usr-new"
        assert len(result.access_token) == 256
        saved = mock_user_repo.create.call_args.args[0]
        assert saved.hashed_password != "secret123"
        assert saved.access_token == result.access_token

    @pytest.mark.asyncio
    async def test_register_response_never_contains_password(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_username.return_value = None
        mock_user_repo.create.side_effect = lambda user: _with_id(user, "usr-2")

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute(CredentialsRequest(username="ada", password="secret123"))
        dumped = result.model_dump(by_alias=True)
        assert set(dumped) == {"success", "id", "accessToken"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username, password",
        [(None, "secret123"), ("ada", None), ("", "secret123"), ("ada", "")],
    )
    async def test_register_missing_fields_raises(self, mock_user_repo, username, password):
        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(InvalidArgumentError, match="required"):
            await use_case.execute(CredentialsRequest(username=username, password=password))
        mock_user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_duplicate_username_raises(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = User(
            id="usr-1",
            username="ada",
            hashed_password="hash",
            access_token=TOKEN,
        )

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ConflictError, match="already exists"):
            await use_case.execute(CredentialsRequest(username="ada", password="secret123"))
        mock_user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_race_surfaces_store_conflict(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_username.return_value = None
        mock_user_repo.create.side_effect = ConflictError("Username already exists")

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ConflictError):
            await use_case.execute(CredentialsRequest(username="ada", password="secret123"))


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success_returns_existing_token(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_username.return_value = User(
            id="usr-123",
            username="ada",
            hashed_password=hash_password("secret123"),
            access_token=TOKEN,
        )

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute(CredentialsRequest(username="ada", password="secret123"))
        assert result.id == "usr-123"
        assert result.access_token == TOKEN

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo):
        mock_user_repo.find_by_username.return_value = None
        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(UnauthenticatedError) as exc_info:
            await use_case.execute(CredentialsRequest(username="nobody", password="anypass123"))
        assert exc_info.value.message == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_login_wrong_password_same_message(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_username.return_value = User(
            id="usr-1",
            username="ada",
            hashed_password=hash_password("correctpass"),
            access_token=TOKEN,
        )

        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(UnauthenticatedError) as exc_info:
            await use_case.execute(CredentialsRequest(username="ada", password="wrongpassword"))
        assert exc_info.value.message == "Invalid username or password"


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", [TOKEN, f"Bearer {TOKEN}"])
    async def test_resolves_raw_and_bearer_tokens(self, mock_user_repo, header):
        mock_user_repo.find_by_access_token.return_value = User(
            id="usr-123",
            username="ada",
            hashed_password="hash",
            access_token=TOKEN,
        )

        use_case = GetCurrentUserUseCase(mock_user_repo)
        result = await use_case.execute(header)
        assert result.id == "usr-123"
        assert result.username == "ada"
        mock_user_repo.find_by_access_token.assert_awaited_once_with(TOKEN)

    @pytest.mark.asyncio
    async def test_missing_header_raises(self, mock_user_repo):
        use_case = GetCurrentUserUseCase(mock_user_repo)
        with pytest.raises(UnauthenticatedError, match="missing"):
            await use_case.execute(None)
        mock_user_repo.find_by_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_token_raises(self, mock_user_repo):
        mock_user_repo.find_by_access_token.return_value = None
        use_case = GetCurrentUserUseCase(mock_user_repo)
        with pytest.raises(UnauthenticatedError, match="Invalid"):
            await use_case.execute("not-a-real-token")


class TestListUsersUseCase:
    """Tests for ListUsersUseCase"""

    @pytest.mark.asyncio
    async def test_excludes_credentials(self, mock_user_repo):
        mock_user_repo.find_all.return_value = [
            User(id="usr-1", username="ada", hashed_password="hash", access_token=TOKEN),
        ]
        result = await ListUsersUseCase(mock_user_repo).execute()
        assert [user.model_dump() for user in result] == [{"id": "usr-1", "username": "ada"}]

    @pytest.mark.asyncio
    async def test_empty(self, mock_user_repo):
        mock_user_repo.find_all.return_value = []
        assert await ListUsersUseCase(mock_user_repo).execute() == []


def _with_id(user: User, user_id: str) -> User:
    user.id = user_id
    return user
