from typing import List, Optional

from ...port.user_repository import UserRepository
from ...domain.entity.user_entity import User
from ...domain.exception.user_exceptions import invalid_argument


class UserQueryService:
    """ユーザーの参照系ユースケース"""

    def __init__(self, user_repository: UserRepository):
        if user_repository is None:
            raise ValueError("user_repository cannot be None")
        self._user_repository = user_repository

    async def get_users(self) -> List[User]:
        """全ユーザーを取得（存在しなければ空リスト）"""
        users = await self._user_repository.get_users()
        return list(users) if users else []

    async def get_user(self, user_id: Optional[str]) -> Optional[User]:
        """ID でユーザーを取得。見つからなければ None"""
        if user_id is None or not user_id.strip():
            raise invalid_argument("User ID cannot be null or empty")
        return await self._user_repository.get_user(user_id)
