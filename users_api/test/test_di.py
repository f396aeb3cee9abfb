"""DIコンテナのテスト"""
import sys
import os

# Add path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from users_api.infra.di import (
    DIContainer,
    get_container,
    get_user_command_service,
    get_user_query_service,
    get_user_repository,
)
from users_api.infra.tortoise_client.user_repository import TortoiseUserRepository
from users_api.usecase.user_management.user_command_service import UserCommandService
from users_api.usecase.user_management.user_query_service import UserQueryService


class TestDIContainer:

    def test_services_are_singletons(self):
        assert get_user_command_service() is get_user_command_service()
        assert get_user_query_service() is get_user_query_service()
        assert get_user_repository() is get_container().user_repository

    def test_services_share_repository(self):
        container = DIContainer()

        assert isinstance(container.user_repository, TortoiseUserRepository)
        assert isinstance(container.user_command_service, UserCommandService)
        assert isinstance(container.user_query_service, UserQueryService)
        assert container.user_command_service._user_repository is container.user_repository
        assert container.user_query_service._user_repository is container.user_repository
