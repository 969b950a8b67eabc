from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from movie_api.application.dto.auth import TokenClaims
from movie_api.application.ports.token_port import TokenPort
from movie_api.domain.entities.auth import AuthToken
from movie_api.domain.entities.user import User
from movie_api.domain.exceptions import ExpiredTokenError, InvalidTokenError

DEFAULT_ALGORITHM = "HS256"
DEFAULT_TTL_DAYS = 7


class JwtTokenService(TokenPort):
    """Signs and verifies stateless bearer tokens.

    Only ``sub`` (username) and ``uid`` (user id) identify the user inside the
    claims. Expiry is checked here against the caller's clock, after the signature,
    so that ``exp == now`` is already rejected.
    """

    def __init__(
        self,
        *,
        jwt_secret: str,
        algorithm: str = DEFAULT_ALGORITHM,
        ttl_days: int = DEFAULT_TTL_DAYS,
    ):
        if not jwt_secret:
            raise ValueError("jwt_secret is required.")
        self._jwt_secret = jwt_secret
        self._algorithm = algorithm
        self._ttl_days = ttl_days

    def issue(self, *, user: User, now: datetime) -> AuthToken:
        issued_at = int(now.timestamp())
        expires_at = int((now + timedelta(days=self._ttl_days)).timestamp())
        payload = {
            "sub": user.username,
            "uid": user.id,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._jwt_secret, algorithm=self._algorithm)
        return AuthToken(
            token=token,
            subject_username=user.username,
            user_id=user.id,
            issued_at=_from_timestamp(issued_at),
            expires_at=_from_timestamp(expires_at),
            algorithm=self._algorithm,
        )

    def decode(self, *, token: str, now: datetime) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["sub", "uid", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.PyJWTError as exc:
            raise InvalidTokenError("Invalid access token.") from exc

        subject = payload.get("sub")
        user_id = payload.get("uid")
        if not subject or not isinstance(subject, str):
            raise InvalidTokenError("Invalid token subject.")
        if not user_id or not isinstance(user_id, str):
            raise InvalidTokenError("Invalid token user id.")

        exp = payload.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, (int, float)):
            raise InvalidTokenError("Invalid token expiry.")
        if exp <= now.timestamp():
            raise ExpiredTokenError("Access token expired.")

        iat = payload.get("iat")
        issued_at = _from_timestamp(iat) if isinstance(iat, (int, float)) and not isinstance(iat, bool) else None
        return TokenClaims(
            subject_username=subject,
            user_id=user_id,
            issued_at=issued_at,
            expires_at=_from_timestamp(exp),
        )


def _from_timestamp(value: float) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc)
