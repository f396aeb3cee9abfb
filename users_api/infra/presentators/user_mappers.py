from typing import List, Optional

from ...domain.entity.user_entity import User
from ..rest_api.schemas import UserCreateRequest, UserUpdateRequest, UserResponse


def create_request_to_user(request: Optional[UserCreateRequest]) -> Optional[User]:
    if request is None:
        return None
    return User(
        id=None,
        name=request.name,
        login=request.login,
        password=request.password,
    )


def update_request_to_user(user_id: str, request: Optional[UserUpdateRequest]) -> Optional[User]:
    """PATCH ボディとパスの ID から更新用ユーザーを組み立てる"""
    if request is None:
        return None
    return User(
        id=user_id,
        name=request.name,
        login=request.login,
        password=request.password,
    )


def user_to_response(user: Optional[User]) -> Optional[UserResponse]:
    if user is None:
        return None
    return UserResponse(id=user.id, name=user.name, login=user.login)


def users_to_response(users: List[User]) -> List[UserResponse]:
    return [user_to_response(user) for user in users]
