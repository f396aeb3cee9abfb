from typing import Optional, List

from tortoise.exceptions import IntegrityError

from ...port.user_repository import UserRepository
from ...domain.entity.user_entity import User
from ...domain.exception.user_exceptions import login_already_exists
from .models import User as DbUser


def db_user_to_user(db_user: DbUser) -> User:
    """ORM モデル -> ドメインエンティティ"""
    return User(
        id=db_user.id,
        name=db_user.name,
        login=db_user.login,
        password=db_user.password,
    )


class TortoiseUserRepository(UserRepository):
    """
    Tortoise ORM を用いた UserRepository の実装

    login の UNIQUE 制約違反は LOGIN_ALREADY_EXISTS に変換する。
    サービス層の存在確認と書き込みの間に割り込まれた場合の最終防衛線。
    """

    async def create_user(self, user: User) -> User:
        try:
            db_user = await DbUser.create(
                name=user.name,
                login=user.login,
                password=user.password,
            )
        except IntegrityError as e:
            raise login_already_exists(user.login) from e
        return db_user_to_user(db_user)

    async def update_user(self, user: User) -> Optional[User]:
        """ユーザーを更新。存在しなければ None"""
        if not user.id:
            return None
        db_user = await DbUser.filter(id=user.id).first()
        if db_user is None:
            return None

        db_user.name = user.name
        db_user.login = user.login
        db_user.password = user.password
        try:
            await db_user.save()
        except IntegrityError as e:
            raise login_already_exists(user.login) from e
        return db_user_to_user(db_user)

    async def delete_user(self, user_id: str) -> None:
        await DbUser.filter(id=user_id).delete()

    async def get_users(self) -> List[User]:
        """全ユーザーを取得"""
        db_users = await DbUser.all()
        return [db_user_to_user(db_user) for db_user in db_users]

    async def get_user(self, user_id: Optional[str]) -> Optional[User]:
        """ID でユーザーを取得"""
        if not user_id:
            return None
        db_user = await DbUser.filter(id=user_id).first()
        if db_user is None:
            return None
        return db_user_to_user(db_user)

    async def exists_by_login(self, login: Optional[str]) -> bool:
        if login is None or not login.strip():
            return False
        return await DbUser.filter(login=login).exists()
