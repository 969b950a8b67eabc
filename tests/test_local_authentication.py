from __future__ import annotations

from movie_api.application.use_cases.authenticate_local import LocalAuthenticationStrategy
from movie_api.domain.entities.auth import AuthFailureReason
from movie_api.domain.entities.user import User
from movie_api.domain.exceptions import MalformedPasswordHashError, StoreUnavailableError


class FakeCredentialStore:
    def __init__(self, users: list[User] | None = None, *, unavailable: bool = False):
        self.users = {user.username: user for user in users or []}
        self.unavailable = unavailable
        self.lookups = 0

    def find_user_by_username(self, *, username: str) -> User | None:
        self.lookups += 1
        if self.unavailable:
            raise StoreUnavailableError("down")
        return self.users.get(username)

    def find_user_by_id(self, *, user_id: str) -> User | None:
        self.lookups += 1
        for user in self.users.values():
            if user.id == user_id:
                return user
        return None


class FakePasswordHasher:
    def __init__(self):
        self.verifications = 0

    def hash(self, plain_password: str) -> str:
        return f"hashed::{plain_password}"

    def verify(self, plain_password: str, password_hash: str) -> bool:
        self.verifications += 1
        if not password_hash.startswith("hashed::"):
            raise MalformedPasswordHashError("bad hash")
        return password_hash == f"hashed::{plain_password}"


def _alice(password_hash: str = "hashed::s3cret") -> User:
    return User(
        id="user-1",
        username="alice",
        password_hash=password_hash,
        email="alice@example.com",
        birthday=None,
    )


def _strategy(store: FakeCredentialStore, hasher: FakePasswordHasher | None = None):
    return LocalAuthenticationStrategy(
        credential_store=store,
        password_hasher=hasher or FakePasswordHasher(),
    )


def test_valid_credentials_return_user():
    store = FakeCredentialStore([_alice()])
    hasher = FakePasswordHasher()

    outcome = _strategy(store, hasher).authenticate("alice", "s3cret")

    assert outcome.ok
    assert outcome.user.id == "user-1"
    assert store.lookups == 1
    assert hasher.verifications == 1


def test_unknown_user_fails_without_verifying():
    store = FakeCredentialStore([_alice()])
    hasher = FakePasswordHasher()

    outcome = _strategy(store, hasher).authenticate("ghost", "x")

    assert not outcome.ok
    assert outcome.reason is AuthFailureReason.USER_NOT_FOUND
    assert hasher.verifications == 0


def test_wrong_password_is_incorrect_password():
    store = FakeCredentialStore([_alice()])

    outcome = _strategy(store).authenticate("alice", "wrong")

    assert outcome.user is None
    assert outcome.reason is AuthFailureReason.INCORRECT_PASSWORD


def test_username_match_is_case_sensitive():
    outcome = _strategy(FakeCredentialStore([_alice()])).authenticate("Alice", "s3cret")

    assert outcome.reason is AuthFailureReason.USER_NOT_FOUND


def test_malformed_stored_hash_is_reported_not_raised():
    store = FakeCredentialStore([_alice(password_hash="garbage")])

    outcome = _strategy(store).authenticate("alice", "s3cret")

    assert outcome.reason is AuthFailureReason.MALFORMED_CREDENTIALS


def test_blank_credentials_skip_store():
    store = FakeCredentialStore([_alice()])
    strategy = _strategy(store)

    assert strategy.authenticate(None, "s3cret").reason is AuthFailureReason.MALFORMED_CREDENTIALS
    assert strategy.authenticate("alice", "").reason is AuthFailureReason.MALFORMED_CREDENTIALS
    assert strategy.authenticate("  ", "s3cret").reason is AuthFailureReason.MALFORMED_CREDENTIALS
    assert store.lookups == 0


def test_store_outage_is_store_unavailable():
    store = FakeCredentialStore([_alice()], unavailable=True)

    outcome = _strategy(store).authenticate("alice", "s3cret")

    assert outcome.reason is AuthFailureReason.STORE_UNAVAILABLE
