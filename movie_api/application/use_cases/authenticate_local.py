from __future__ import annotations

import logging

from movie_api.application.ports.credential_store_port import CredentialStorePort
from movie_api.application.ports.password_hasher_port import PasswordHasherPort
from movie_api.domain.entities.auth import AuthenticationOutcome, AuthFailureReason
from movie_api.domain.exceptions import MalformedPasswordHashError, StoreUnavailableError

logger = logging.getLogger(__name__)


class LocalAuthenticationStrategy:
    """Username/password verification against the credential store.

    Every attempt ends in an ``AuthenticationOutcome``. An unknown user, a wrong
    password or an unreachable store is a failure value, never an exception.
    """

    def __init__(
        self,
        *,
        credential_store: CredentialStorePort,
        password_hasher: PasswordHasherPort,
    ):
        self._credential_store = credential_store
        self._password_hasher = password_hasher

    def authenticate(self, username: str | None, password: str | None) -> AuthenticationOutcome:
        if not username or not username.strip() or not password:
            return AuthenticationOutcome.failure(AuthFailureReason.MALFORMED_CREDENTIALS)

        try:
            user = self._credential_store.find_user_by_username(username=username)
        except StoreUnavailableError:
            logger.error("local_auth: store_unavailable username=%s", username)
            return AuthenticationOutcome.failure(AuthFailureReason.STORE_UNAVAILABLE)

        if user is None:
            return AuthenticationOutcome.failure(AuthFailureReason.USER_NOT_FOUND)

        try:
            verified = self._password_hasher.verify(password, user.password_hash)
        except MalformedPasswordHashError:
            logger.warning("local_auth: malformed_password_hash user_id=%s", user.id)
            return AuthenticationOutcome.failure(AuthFailureReason.MALFORMED_CREDENTIALS)

        if not verified:
            return AuthenticationOutcome.failure(AuthFailureReason.INCORRECT_PASSWORD)
        return AuthenticationOutcome.success(user)
