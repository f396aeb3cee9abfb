"""
FastAPI依存性注入の定義

DIコンテナからサービスインスタンスを取得し、FastAPIの依存性システムに
統合するためのアダプターレイヤーです。テストでは app.dependency_overrides で
これらの関数を差し替えます。
"""

from ..di import get_user_command_service, get_user_query_service
from ..presentators.user_validators import UserCreateValidator, UserUpdateValidator
from ...usecase.user_management.user_command_service import UserCommandService
from ...usecase.user_management.user_query_service import UserQueryService


def get_user_command_service_dependency() -> UserCommandService:
    """
    ユーザーコマンドサービスの依存性を取得

    Returns:
        UserCommandService: 作成・更新・削除を扱うサービス
    """
    return get_user_command_service()


def get_user_query_service_dependency() -> UserQueryService:
    """
    ユーザークエリサービスの依存性を取得

    Returns:
        UserQueryService: 参照系を扱うサービス
    """
    return get_user_query_service()


def get_user_create_validator() -> UserCreateValidator:
    return UserCreateValidator()


def get_user_update_validator() -> UserUpdateValidator:
    return UserUpdateValidator()
