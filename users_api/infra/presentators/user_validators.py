"""
リクエストボディのフィールド検証

作成時は name / login / password が全て必須、更新時は全て任意。
エラーメッセージは途中で打ち切らずに全て集めて返す。空のリストは検証成功を意味する。
"""

from typing import List, Optional

from ..rest_api.schemas import UserCreateRequest, UserUpdateRequest

USER_FIELDS = ("name", "login", "password")
BODY_REQUIRED_MESSAGE = "request body is required"


def _is_blank(value: str) -> bool:
    return not value.strip()


class UserCreateValidator:
    def validate(self, request: Optional[UserCreateRequest]) -> List[str]:
        if request is None:
            return [BODY_REQUIRED_MESSAGE]

        errors = []
        for field in USER_FIELDS:
            value = getattr(request, field)
            if value is None:
                errors.append(f"{field} is required")
            elif _is_blank(value):
                errors.append(f"{field} cannot be empty")
        return errors

    def is_valid(self, request: Optional[UserCreateRequest]) -> bool:
        return not self.validate(request)


class UserUpdateValidator:
    def validate(self, request: Optional[UserUpdateRequest]) -> List[str]:
        if request is None:
            return [BODY_REQUIRED_MESSAGE]

        errors = []
        for field in USER_FIELDS:
            value = getattr(request, field)
            # 未指定 (None) は「変更なし」なのでエラーにしない
            if value is not None and _is_blank(value):
                errors.append(f"{field} cannot be empty")
        return errors

    def is_valid(self, request: Optional[UserUpdateRequest]) -> bool:
        return not self.validate(request)
