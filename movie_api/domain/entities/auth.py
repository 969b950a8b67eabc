from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from movie_api.domain.entities.user import User


class AuthFailureReason(str, Enum):
    USER_NOT_FOUND = "user_not_found"
    INCORRECT_PASSWORD = "incorrect_password"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    MALFORMED_CREDENTIALS = "malformed_credentials"
    STORE_UNAVAILABLE = "store_unavailable"


@dataclass(frozen=True)
class AuthenticationOutcome:
    """Result of one verification attempt: a user on success, a reason otherwise."""

    user: User | None = None
    reason: AuthFailureReason | None = None

    def __post_init__(self):
        if (self.user is None) == (self.reason is None):
            raise ValueError("AuthenticationOutcome needs exactly one of user or reason.")

    @classmethod
    def success(cls, user: User) -> AuthenticationOutcome:
        return cls(user=user)

    @classmethod
    def failure(cls, reason: AuthFailureReason) -> AuthenticationOutcome:
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.user is not None


@dataclass(frozen=True)
class AuthToken:
    token: str
    subject_username: str
    user_id: str
    issued_at: datetime
    expires_at: datetime
    algorithm: str
