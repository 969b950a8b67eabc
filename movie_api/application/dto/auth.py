from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class PublicUserOutput:
    id: str
    username: str
    email: str
    birthday: date | None
    favorite_movie_ids: list[str]


@dataclass(frozen=True)
class LoginInput:
    username: str | None
    password: str | None


@dataclass(frozen=True)
class LoginOutput:
    user: PublicUserOutput
    token: str
    expires_at: datetime


@dataclass(frozen=True)
class TokenClaims:
    subject_username: str
    user_id: str
    issued_at: datetime | None
    expires_at: datetime
