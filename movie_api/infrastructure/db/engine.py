from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def _connect_args(dsn: str, timeout_seconds: float) -> dict:
    if dsn.startswith("sqlite"):
        return {"timeout": timeout_seconds, "check_same_thread": False}
    if dsn.startswith("postgresql"):
        return {
            "connect_timeout": max(int(timeout_seconds), 1),
            "options": f"-c statement_timeout={max(int(timeout_seconds * 1000), 1)}",
        }
    return {}


@lru_cache(maxsize=4)
def get_engine(dsn: str, timeout_seconds: float = 5.0):
    kwargs = {
        "future": True,
        "pool_pre_ping": True,
        "connect_args": _connect_args(dsn, timeout_seconds),
    }
    if not dsn.startswith("sqlite"):
        kwargs["pool_timeout"] = timeout_seconds
    return create_engine(dsn, **kwargs)


def create_schema(engine) -> None:
    from movie_api.infrastructure.db.models import movies, users  # noqa: F401

    Base.metadata.create_all(engine)
