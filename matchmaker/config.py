from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


DEFAULT_PROTECTED_PREFIXES = [
    "/profile",
    "/dashboard",
    "/settings",
    "/matches",
    "/messages",
    "/family-details",
]


class Settings(BaseSettings):
    app_name: str = Field(default="Matchmaker Backend")
    api_prefix: str = Field(default="/api")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    # Database configuration
    # DB_URL wins when set. Otherwise discrete MySQL settings are used outside development
    # (or when USE_MYSQL=true), and development falls back to a local sqlite file.
    db_url: str | None = Field(default=None)
    use_mysql: bool = Field(default=False)
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=3306)
    db_name: str = Field(default="matchmaker")
    db_user: str = Field(default="root")
    db_password: str = Field(default="password")
    db_charset: str = Field(default="utf8mb4")

    # Identity provider tokens. The provider signs; we only verify.
    identity_jwt_secret: str = Field(default="change-me")
    identity_jwt_algorithm: str = Field(default="HS256")
    identity_audience: str | None = Field(default=None)
    identity_issuer: str | None = Field(default=None)
    session_cookie_name: str = Field(default="access_token")
    login_url: str = Field(default="/api/auth/login")
    protected_path_prefixes: list[str] = Field(default_factory=lambda: list(DEFAULT_PROTECTED_PREFIXES))

    # Seconds to wait before retrying the update path after a duplicate-key insert.
    user_sync_retry_delay: float = Field(default=0.1, ge=0)

    # Tab saves historically leave is_complete untouched; flip to recompute it there too.
    recompute_completion_on_tab_save: bool = Field(default=False)

    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
    )

    @field_validator("protected_path_prefixes", mode="after")
    @classmethod
    def _normalize_prefixes(cls, v: list[str]) -> list[str]:
        prefixes: list[str] = []
        for item in v:
            value = (item or "").strip().rstrip("/")
            if not value:
                continue
            if not value.startswith("/"):
                value = "/" + value
            prefixes.append(value)
        return prefixes

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.db_url:
        return settings.db_url

    if settings.is_development() and not settings.use_mysql:
        return "sqlite:///./dev.db"

    # NOTE: password may include special chars; safest is to rely on DB_URL for complex passwords.
    return (
        f"mysql+pymysql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
        f"?charset={settings.db_charset}"
    )
