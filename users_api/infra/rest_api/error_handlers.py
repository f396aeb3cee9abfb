from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from typing import Dict, Any, List

from ..logging_config import get_logger
from ...domain.exception.user_exceptions import UserError, UserErrorKind

logger = get_logger("api.errors")


USER_ERROR_STATUS = {
    UserErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    UserErrorKind.LOGIN_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    UserErrorKind.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    UserErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
}


def error_response(message: str, status_code: int) -> JSONResponse:
    """単一エラーのレスポンス {"error": "..."}"""
    return JSONResponse(status_code=status_code, content={"error": message})


def validation_error_response(messages: List[str]) -> JSONResponse:
    """フィールド検証エラーのレスポンス {"errors": [...]}"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": list(messages)},
    )


def create_error_response(
    error_type: str,
    message: str,
    detail: Any = None,
    status_code: int = 500,
    additional_data: Dict[str, Any] = None
) -> JSONResponse:
    """フレームワーク由来のエラー用の統一レスポンス"""
    content = {
        "error_type": error_type,
        "error": message,
    }

    if detail:
        content["detail"] = detail

    if additional_data:
        content.update(additional_data)

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(content)
    )


async def handle_user_error(request: Request, exc: UserError):
    """ドメイン例外 (UserError) を kind に応じて HTTP ステータスへ変換"""
    status_code = USER_ERROR_STATUS.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.warning(
        f"User error: {exc.error_code}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_code": exc.error_code,
            "error": str(exc)
        }
    )

    if exc.kind is UserErrorKind.VALIDATION:
        return validation_error_response(exc.messages)
    return error_response(exc.message, status_code)


async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """FastAPIバリデーションエラー（JSON 形式不正など）のハンドリング"""
    logger.warning(
        "FastAPI validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": exc.errors()
        }
    )

    return create_error_response(
        error_type="request_validation_error",
        message="Malformed request",
        detail=exc.errors(),
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


async def handle_generic_error(request: Request, exc: Exception):
    """その他のエラーのハンドリング"""
    logger.error(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error": str(exc),
            "error_type": type(exc).__name__
        },
        exc_info=True
    )

    return create_error_response(
        error_type="internal_error",
        message="Internal server error",
        detail=str(exc) if request.app.debug else None,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
