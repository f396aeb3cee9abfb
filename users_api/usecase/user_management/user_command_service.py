"""
ユーザーのコマンド（作成・更新・削除）ユースケース

ログイン名の一意性、存在確認、部分更新のマージ規則をここで保証し、
永続化はリポジトリポートへ委譲します。ログ出力は境界層の責務のため
このモジュールでは行いません。
"""

from dataclasses import dataclass
from typing import Optional, Union

from ...port.user_repository import UserRepository
from ...domain.entity.user_entity import User
from ...domain.exception.user_exceptions import (
    invalid_argument,
    login_already_exists,
    user_not_found,
)


@dataclass(frozen=True)
class UserUpdated:
    """更新成功"""
    user: User


@dataclass(frozen=True)
class UserUpdateNotFound:
    """更新対象が存在しない（エラーではなく結果として返す）"""
    user_id: Optional[str]


UpdateUserResult = Union[UserUpdated, UserUpdateNotFound]


def merge_user_changes(existing: User, changes: User) -> User:
    """
    既存ユーザーに変更内容を上書きする

    id は常に既存値。name / login / password はそれぞれ独立に、
    変更側が None でなければその値（空文字も含む）を採用する。
    """
    return User(
        id=existing.id,
        name=changes.name if changes.name is not None else existing.name,
        login=changes.login if changes.login is not None else existing.login,
        password=changes.password if changes.password is not None else existing.password,
    )


class UserCommandService:
    """ユーザーの状態を変更する操作"""

    def __init__(self, user_repository: UserRepository):
        if user_repository is None:
            raise ValueError("user_repository cannot be None")
        self._user_repository = user_repository

    async def create_user(self, user: User) -> User:
        """
        ユーザーを新規作成する

        Raises:
            UserError(INVALID_ARGUMENT): user が None の場合
            UserError(LOGIN_ALREADY_EXISTS): ログイン名が既に使われている場合
        """
        if user is None:
            raise invalid_argument("User cannot be None")

        if user.login is not None:
            if await self._user_repository.exists_by_login(user.login):
                raise login_already_exists(user.login)

        return await self._user_repository.create_user(user)

    async def update_user(self, user: User) -> UpdateUserResult:
        """
        既存ユーザーを部分更新する

        対象が存在しない場合は UserUpdateNotFound を返す。

        Raises:
            UserError(LOGIN_ALREADY_EXISTS): 別ユーザーのログイン名へ変更しようとした場合
        """
        existing = await self._user_repository.get_user(user.id)
        if existing is None:
            return UserUpdateNotFound(user_id=user.id)

        if user.login is not None and user.login != existing.login:
            if await self._user_repository.exists_by_login(user.login):
                raise login_already_exists(user.login)

        merged = merge_user_changes(existing, user)
        updated = await self._user_repository.update_user(merged)
        # 存在確認と更新の間に削除された
        if updated is None:
            return UserUpdateNotFound(user_id=user.id)
        return UserUpdated(user=updated)

    async def delete_user(self, user_id: Optional[str]) -> None:
        """
        ユーザーを削除する

        Raises:
            UserError(USER_NOT_FOUND): 指定 ID のユーザーが存在しない場合
        """
        existing = await self._user_repository.get_user(user_id)
        if existing is None:
            raise user_not_found(user_id)

        await self._user_repository.delete_user(user_id)
