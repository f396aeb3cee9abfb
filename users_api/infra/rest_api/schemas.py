from pydantic import BaseModel
from typing import Optional


# フィールドの必須・空文字チェックは presentators.user_validators で行う。
# pydantic 側で弾くと 422 になってしまうため、ここでは全て Optional にする。
class UserCreateRequest(BaseModel):
    name: Optional[str] = None
    login: Optional[str] = None
    password: Optional[str] = None


class UserUpdateRequest(BaseModel):
    name: Optional[str] = None
    login: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """レスポンス用（password は含めない）"""
    id: str
    name: str
    login: str
