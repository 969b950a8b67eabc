from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _bool(name: str, default: str = "false") -> bool:
    return (_env(name, default) or "").strip().lower() in {"1", "true", "yes", "on"}


def _csv(name: str, default: str = "") -> tuple[str, ...]:
    value = _env(name, default) or ""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    jwt_algorithm: str
    jwt_ttl_days: int
    database_url: str
    database_auto_create: bool
    store_timeout_seconds: float
    bcrypt_rounds: int
    cors_allow_origins: tuple[str, ...]
    access_log_path: str
    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        jwt_secret=_env("JWT_SECRET", ""),
        jwt_algorithm=_env("JWT_ALGORITHM", "HS256"),
        jwt_ttl_days=int(_env("JWT_TTL_DAYS", "7")),
        database_url=_env("DATABASE_URL", "sqlite:///./movie_api.db"),
        database_auto_create=_bool("DATABASE_AUTO_CREATE"),
        store_timeout_seconds=float(_env("STORE_TIMEOUT_SECONDS", "5")),
        bcrypt_rounds=int(_env("BCRYPT_ROUNDS", "10")),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
        access_log_path=_env("ACCESS_LOG_PATH", ""),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
