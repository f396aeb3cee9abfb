import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from tortoise import Tortoise

from users_api.infra.config import Settings
from users_api.infra.logging_config import LoggingMiddleware, get_logger
from users_api.infra.tortoise_client.config import build_tortoise_config
from users_api.domain.exception.user_exceptions import UserError

from .routers.health import router as health_router, APPLICATION_NAME, APPLICATION_VERSION
from .routers.users import router as users_router
from .error_handlers import (
    handle_user_error,
    handle_validation_exception,
    handle_generic_error,
)

settings = Settings()
# 本番環境では適切なログレベルを設定する
log_level = logging.INFO if settings.environment == "production" else logging.DEBUG
logger = get_logger("app", level=log_level)

app = FastAPI(
    title=APPLICATION_NAME,
    description="User management API (create, read, update, delete) protected by HTTP Basic authentication",
    version=APPLICATION_VERSION,
)

app.add_middleware(LoggingMiddleware)

# CORS 設定（環境設定に基づく）
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(users_router)

app.add_exception_handler(UserError, handle_user_error)
app.add_exception_handler(RequestValidationError, handle_validation_exception)
app.add_exception_handler(Exception, handle_generic_error)


def _ensure_sqlite_directory(database_url: str) -> None:
    """sqlite://path/to/file.db の親ディレクトリを作成"""
    prefix = "sqlite://"
    if not database_url.startswith(prefix):
        return
    path = database_url[len(prefix):]
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


@app.on_event("startup")
async def startup_event():
    """アプリケーション起動時の初期化処理"""
    logger.info("Application starting up", extra={"environment": settings.environment})

    _ensure_sqlite_directory(settings.database_url)
    await Tortoise.init(config=build_tortoise_config(settings.database_url))
    if settings.generate_schemas:
        await Tortoise.generate_schemas(safe=True)
    logger.info("Tortoise ORM initialized")


@app.on_event("shutdown")
async def shutdown_event():
    """アプリケーション終了時のクリーンアップ"""
    await Tortoise.close_connections()
    logger.info("Application shutdown complete")


#uvicorn users_api.infra.rest_api.main:app --reload
