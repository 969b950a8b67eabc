from __future__ import annotations

from movie_api.domain.entities.auth import AuthFailureReason


class DomainError(Exception):
    """Base for domain errors."""


class UsernameAlreadyExistsError(DomainError):
    """Another account already uses the requested username."""


class UserNotFoundError(DomainError):
    """No user with the given username or id."""


class ForbiddenUserError(DomainError):
    """Authenticated user tried to act on another user's account."""


class MovieNotFoundError(DomainError):
    """No movie with the given title."""


class DirectorNotFoundError(DomainError):
    """No movie is directed by the given name."""


class StoreUnavailableError(DomainError):
    """The user or movie store could not be reached in time."""


class MalformedPasswordHashError(DomainError):
    """Stored password hash is corrupt or uses an unknown scheme."""


class InvalidTokenError(DomainError):
    """Bearer token is unsigned, tampered or structurally wrong."""


class ExpiredTokenError(DomainError):
    """Bearer token signature is valid but its expiry has passed."""


class AuthenticationFailedError(DomainError):
    def __init__(self, reason: AuthFailureReason, message: str | None = None):
        super().__init__(message or reason.value)
        self.reason = reason
