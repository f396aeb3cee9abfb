from typing import Protocol, Optional, List
from ..domain.entity.user_entity import User


class UserRepository(Protocol):
    """
    ユーザーデータの永続化インターフェース。

    id の採番は実装側の責務。exists_by_login は None や空白のみの
    ログイン名に対して False を返すこと。
    """

    async def create_user(self, user: User) -> User:
        ...

    async def update_user(self, user: User) -> Optional[User]:
        ...

    async def delete_user(self, user_id: str) -> None:
        ...

    async def get_users(self) -> List[User]:
        ...

    async def get_user(self, user_id: Optional[str]) -> Optional[User]:
        ...

    async def exists_by_login(self, login: Optional[str]) -> bool:
        ...
