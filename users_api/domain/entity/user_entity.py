from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    ユーザーのビジネスドメインモデル

    作成時は id が None、更新時は既存レコードの id を持つ。
    更新用の値では None のフィールドは「変更しない」を意味する。
    """
    id: Optional[str] = None
    name: Optional[str] = None
    login: Optional[str] = None
    password: Optional[str] = None
