from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException

from movie_api.api.deps import get_bearer_strategy
from movie_api.application.use_cases.authenticate_bearer import BearerAuthenticationStrategy
from movie_api.domain.entities.auth import AuthFailureReason
from movie_api.domain.entities.user import User

logger = logging.getLogger(__name__)


def get_current_user(
    authorization: str | None = Header(default=None),
    strategy: BearerAuthenticationStrategy = Depends(get_bearer_strategy),
) -> User:
    outcome = strategy.authenticate(authorization)
    if outcome.ok:
        return outcome.user

    if outcome.reason is AuthFailureReason.STORE_UNAVAILABLE:
        raise HTTPException(
            status_code=503,
            detail={"message": "Service temporarily unavailable.", "code": outcome.reason.value},
        )

    logger.info("bearer_auth: rejected code=%s", outcome.reason.value)
    raise HTTPException(
        status_code=401,
        detail={"message": "Unauthorized", "code": outcome.reason.value},
        headers={"WWW-Authenticate": "Bearer"},
    )
