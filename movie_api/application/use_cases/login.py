from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from movie_api.application.dto.auth import LoginInput, LoginOutput
from movie_api.application.ports.token_port import TokenPort
from movie_api.application.use_cases.authenticate_local import LocalAuthenticationStrategy
from movie_api.domain.exceptions import AuthenticationFailedError

from .auth_common import build_public_user_output, utcnow

logger = logging.getLogger(__name__)


class LoginUseCase:
    def __init__(
        self,
        *,
        local_strategy: LocalAuthenticationStrategy,
        token_port: TokenPort,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._local_strategy = local_strategy
        self._token_port = token_port
        self._clock = clock

    def execute(self, command: LoginInput) -> LoginOutput:
        outcome = self._local_strategy.authenticate(command.username, command.password)
        if not outcome.ok:
            logger.warning("login: failed username=%s code=%s", command.username, outcome.reason.value)
            raise AuthenticationFailedError(outcome.reason)

        user = outcome.user
        auth_token = self._token_port.issue(user=user, now=self._clock())
        logger.info("login: success user_id=%s username=%s", user.id, user.username)
        return LoginOutput(
            user=build_public_user_output(user),
            token=auth_token.token,
            expires_at=auth_token.expires_at,
        )
