from datetime import datetime

from fastapi import APIRouter

APPLICATION_NAME = "Users API"
APPLICATION_VERSION = "1.0.0"

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health_check():
    """ヘルスチェックエンドポイント（認証不要）"""
    return {
        "status": "UP",
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "application": APPLICATION_NAME,
        "version": APPLICATION_VERSION,
    }
