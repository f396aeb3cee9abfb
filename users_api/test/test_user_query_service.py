import pytest
import sys
import os
from unittest.mock import AsyncMock

# Add path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from users_api.domain.entity.user_entity import User
from users_api.domain.exception.user_exceptions import UserError, UserErrorKind
from users_api.usecase.user_management.user_query_service import UserQueryService


class TestUserQueryService:

    @pytest.fixture
    def mock_user_repo(self):
        return AsyncMock()

    @pytest.fixture
    def service(self, mock_user_repo):
        return UserQueryService(mock_user_repo)

    def test_constructor_rejects_none_repository(self):
        with pytest.raises(ValueError):
            UserQueryService(None)

    @pytest.mark.asyncio
    async def test_get_users_returns_repository_list(self, service, mock_user_repo):
        users = [
            User(id="1", name="John Doe", login="johndoe", password="password"),
            User(id="2", name="Jane Smith", login="janesmith", password="password"),
        ]
        mock_user_repo.get_users.return_value = users

        result = await service.get_users()

        assert result == users
        mock_user_repo.get_users.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_users_empty(self, service, mock_user_repo):
        mock_user_repo.get_users.return_value = []

        assert await service.get_users() == []

    @pytest.mark.asyncio
    async def test_get_users_never_returns_none(self, service, mock_user_repo):
        mock_user_repo.get_users.return_value = None

        assert await service.get_users() == []

    @pytest.mark.asyncio
    async def test_get_user_found(self, service, mock_user_repo):
        user = User(id="U1", name="John", login="john", password="pw")
        mock_user_repo.get_user.return_value = user

        assert await service.get_user("U1") == user
        mock_user_repo.get_user.assert_awaited_once_with("U1")

    @pytest.mark.asyncio
    async def test_get_user_not_found_returns_none(self, service, mock_user_repo):
        mock_user_repo.get_user.return_value = None

        assert await service.get_user("U1") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", [None, "", "   "])
    async def test_get_user_blank_id_is_invalid_argument(self, service, mock_user_repo, user_id):
        with pytest.raises(UserError) as exc_info:
            await service.get_user(user_id)

        assert exc_info.value.kind is UserErrorKind.INVALID_ARGUMENT
        mock_user_repo.get_user.assert_not_awaited()
