from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class User:
    id: str
    username: str
    password_hash: str
    email: str
    birthday: date | None
    favorite_movie_ids: tuple[str, ...] = field(default_factory=tuple)
    created_at: datetime | None = None
