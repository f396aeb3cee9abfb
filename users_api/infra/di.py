from typing import Optional

from .tortoise_client.user_repository import TortoiseUserRepository
from ..port.user_repository import UserRepository as UserRepositoryPort
from ..usecase.user_management.user_command_service import UserCommandService
from ..usecase.user_management.user_query_service import UserQueryService


class DIContainer:
    """依存性注入コンテナ"""

    def __init__(self):
        self._user_repository: Optional[UserRepositoryPort] = None
        self._user_command_service: Optional[UserCommandService] = None
        self._user_query_service: Optional[UserQueryService] = None

    @property
    def user_repository(self) -> UserRepositoryPort:
        """ユーザーリポジトリのシングルトンインスタンスを取得"""
        if self._user_repository is None:
            self._user_repository = TortoiseUserRepository()
        return self._user_repository

    @property
    def user_command_service(self) -> UserCommandService:
        if self._user_command_service is None:
            self._user_command_service = UserCommandService(self.user_repository)
        return self._user_command_service

    @property
    def user_query_service(self) -> UserQueryService:
        if self._user_query_service is None:
            self._user_query_service = UserQueryService(self.user_repository)
        return self._user_query_service


# グローバルDIコンテナインスタンス
_container = DIContainer()


def get_user_repository() -> UserRepositoryPort:
    """ユーザーリポジトリを取得"""
    return _container.user_repository


def get_user_command_service() -> UserCommandService:
    return _container.user_command_service


def get_user_query_service() -> UserQueryService:
    return _container.user_query_service


def get_container() -> DIContainer:
    """DIコンテナを取得（テスト用）"""
    return _container
