"""
認証モジュール

/api/users 配下は HTTP Basic 認証で保護します。
認証情報は設定 (ADMIN_USERNAME / ADMIN_PASSWORD) の管理者アカウント 1 件のみで、
パスワードは起動後最初の利用時に bcrypt でハッシュ化して保持します。
"""

import secrets
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from passlib.context import CryptContext

from .config import Settings
from .logging_config import get_logger

REALM = "Users API"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# auto_error=False: 401 の応答は authenticate_admin で統一して返す
basic_scheme = HTTPBasic(realm=REALM, auto_error=False)

logger = get_logger("auth")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    平文パスワードとハッシュを照合する

    ハッシュ形式が不正な場合も例外にせず False を返す。
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


@lru_cache()
def get_admin_password_hash() -> str:
    return get_password_hash(get_settings().admin_password)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
    )


def authenticate_admin(
    credentials: Annotated[HTTPBasicCredentials | None, Depends(basic_scheme)],
) -> str:
    """
    Basic 認証の資格情報を検証し、認証済みユーザー名を返す

    FastAPI の依存性として保護対象のルーターに設定する。

    Raises:
        HTTPException: 資格情報が無い、または一致しない場合 (401)
    """
    if credentials is None:
        logger.warning("Missing basic credentials")
        raise _unauthorized()

    settings = get_settings()
    username_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"),
        settings.admin_username.encode("utf-8"),
    )
    password_ok = verify_password(credentials.password, get_admin_password_hash())
    if not (username_ok and password_ok):
        logger.warning("Basic authentication failed", extra={"username": credentials.username})
        raise _unauthorized()

    return credentials.username
