"""
ユーザー関連の例外

ユーザー管理で発生するエラーは UserError 一種類で表現し、
種別 (UserErrorKind) とペイロードで区別します。
境界層は kind を見てレスポンスへ変換します。
"""

from enum import Enum
from typing import List, Optional


class UserErrorKind(Enum):
    VALIDATION = "validation_error"
    LOGIN_ALREADY_EXISTS = "login_already_exists"
    USER_NOT_FOUND = "user_not_found"
    INVALID_ARGUMENT = "invalid_argument"


class UserError(Exception):
    """ユーザー操作のエラー（種別 + ペイロード）"""
    def __init__(
        self,
        kind: UserErrorKind,
        message: str,
        login: Optional[str] = None,
        user_id: Optional[str] = None,
        messages: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.login = login
        self.user_id = user_id
        self.messages = messages or [message]

    @property
    def error_code(self) -> str:
        return self.kind.value


def validation_error(messages: List[str]) -> UserError:
    """入力値のフィールド検証エラー"""
    return UserError(UserErrorKind.VALIDATION, "; ".join(messages), messages=list(messages))


def login_already_exists(login: Optional[str]) -> UserError:
    """ログイン名の重複"""
    return UserError(
        UserErrorKind.LOGIN_ALREADY_EXISTS,
        f"User with login '{login}' already exists",
        login=login,
    )


def user_not_found(user_id: Optional[str]) -> UserError:
    """指定 ID のユーザーが存在しない"""
    return UserError(
        UserErrorKind.USER_NOT_FOUND,
        f"User with ID '{user_id}' not found",
        user_id=user_id,
    )


def invalid_argument(message: str) -> UserError:
    """クエリ操作への不正な引数"""
    return UserError(UserErrorKind.INVALID_ARGUMENT, message)
