from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from movie_api.application.ports.credential_store_port import CredentialStorePort
from movie_api.application.ports.token_port import TokenPort
from movie_api.domain.entities.auth import AuthenticationOutcome, AuthFailureReason
from movie_api.domain.exceptions import ExpiredTokenError, InvalidTokenError, StoreUnavailableError

from .auth_common import utcnow

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    parts = authorization.strip().split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


class BearerAuthenticationStrategy:
    """Verifies a bearer token per request and re-resolves its user.

    Embedded claims only route the lookup; the returned user always comes from the
    credential store. No writes happen here.
    """

    def __init__(
        self,
        *,
        credential_store: CredentialStorePort,
        token_port: TokenPort,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._credential_store = credential_store
        self._token_port = token_port
        self._clock = clock

    def authenticate(self, authorization: str | None) -> AuthenticationOutcome:
        token = extract_bearer_token(authorization)
        if token is None:
            return AuthenticationOutcome.failure(AuthFailureReason.MALFORMED_CREDENTIALS)

        try:
            claims = self._token_port.decode(token=token, now=self._clock())
        except ExpiredTokenError:
            return AuthenticationOutcome.failure(AuthFailureReason.TOKEN_EXPIRED)
        except InvalidTokenError:
            return AuthenticationOutcome.failure(AuthFailureReason.TOKEN_INVALID)

        try:
            user = self._credential_store.find_user_by_id(user_id=claims.user_id)
        except StoreUnavailableError:
            logger.error("bearer_auth: store_unavailable user_id=%s", claims.user_id)
            return AuthenticationOutcome.failure(AuthFailureReason.STORE_UNAVAILABLE)

        if user is None:
            return AuthenticationOutcome.failure(AuthFailureReason.USER_NOT_FOUND)
        return AuthenticationOutcome.success(user)
