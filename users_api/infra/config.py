from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import json


class Settings(BaseSettings):
    # Basic 認証の管理者アカウント
    admin_username: str = Field(default="admin")
    admin_password: str = Field(default="admin")

    # Database
    database_url: str = Field(default="sqlite://data/users_api.db")
    generate_schemas: bool = Field(default=True)

    # Environment
    environment: str = Field(default="development")

    # CORS
    cors_origins: List[str] = Field(default=["*"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v

    @field_validator("admin_username", "admin_password")
    @classmethod
    def validate_admin_credentials(cls, v):
        if not v or not v.strip():
            raise ValueError("ADMIN_USERNAME and ADMIN_PASSWORD must not be empty")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )
