"""
Tortoise ORM configuration
"""
from typing import Any, Dict

from ..config import Settings

MODEL_MODULES = ["users_api.infra.tortoise_client.models"]


def build_tortoise_config(database_url: str) -> Dict[str, Any]:
    """接続 URL から Tortoise / aerich 用の設定辞書を組み立てる"""
    return {
        "connections": {
            "default": database_url
        },
        "apps": {
            "models": {
                "models": [*MODEL_MODULES, "aerich.models"],
                "default_connection": "default",
            },
        },
    }


TORTOISE_ORM = build_tortoise_config(Settings().database_url)
