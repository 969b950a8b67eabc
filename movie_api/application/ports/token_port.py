from __future__ import annotations

from datetime import datetime
from typing import Protocol

from movie_api.application.dto.auth import TokenClaims
from movie_api.domain.entities.auth import AuthToken
from movie_api.domain.entities.user import User


class TokenPort(Protocol):
    def issue(self, *, user: User, now: datetime) -> AuthToken:
        ...

    def decode(self, *, token: str, now: datetime) -> TokenClaims:
        ...
