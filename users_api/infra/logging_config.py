import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict
import traceback
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import time
import uuid


# LogRecord 標準属性（extra として出力しない）
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """1 レコード 1 行の JSON 形式で出力するフォーマッタ"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_obj[key] = value

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str, ensure_ascii=False)


def setup_logging(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = False
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    json_formatter = JSONFormatter()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(json_formatter)
        logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(json_formatter)
        logger.addHandler(file_handler)

    # ハンドラー未指定時は標準出力
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(json_formatter)
        logger.addHandler(console_handler)

    return logger


_loggers: Dict[str, logging.Logger] = {}


def get_logger(name: str, **kwargs) -> logging.Logger:
    """名前ごとにキャッシュされたロガーを取得"""
    if name not in _loggers:
        _loggers[name] = setup_logging(name, **kwargs)
    return _loggers[name]


class LoggingMiddleware(BaseHTTPMiddleware):
    """リクエスト単位のアクセスログ"""

    def __init__(self, app):
        super().__init__(app)
        self.logger = get_logger("api.access")

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start_time = time.perf_counter()

        self.logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else None,
            }
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            self.logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round(duration * 1000, 2),
                    "error": str(e),
                    "traceback": traceback.format_exc(),
                }
            )
            raise

        duration = time.perf_counter() - start_time
        self.logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 2),
            }
        )
        response.headers["X-Request-ID"] = request_id
        return response
