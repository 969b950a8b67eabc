from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
from fastapi.testclient import TestClient

from movie_api.api.deps import get_bearer_strategy, get_list_users_use_case, get_login_use_case
from movie_api.application.dto.auth import PublicUserOutput
from movie_api.application.use_cases.authenticate_bearer import BearerAuthenticationStrategy
from movie_api.application.use_cases.authenticate_local import LocalAuthenticationStrategy
from movie_api.application.use_cases.login import LoginUseCase
from movie_api.domain.entities.user import User
from movie_api.domain.exceptions import StoreUnavailableError
from movie_api.infrastructure.security.token_service import JwtTokenService
from movie_api.main import app

SECRET = "router-secret"


class FakeCredentialStore:
    def __init__(self, users: list[User], *, unavailable: bool = False):
        self.users = {user.username: user for user in users}
        self.unavailable = unavailable

    def find_user_by_username(self, *, username: str) -> User | None:
        if self.unavailable:
            raise StoreUnavailableError("down")
        return self.users.get(username)

    def find_user_by_id(self, *, user_id: str) -> User | None:
        if self.unavailable:
            raise StoreUnavailableError("down")
        for user in self.users.values():
            if user.id == user_id:
                return user
        return None


class FakePasswordHasher:
    def hash(self, plain_password: str) -> str:
        return f"hashed::{plain_password}"

    def verify(self, plain_password: str, password_hash: str) -> bool:
        return password_hash == f"hashed::{plain_password}"


class FakeListUsersUseCase:
    def execute(self) -> list[PublicUserOutput]:
        return [
            PublicUserOutput(
                id="user-1",
                username="alice",
                email="alice@example.com",
                birthday=None,
                favorite_movie_ids=[],
            )
        ]


def _alice() -> User:
    return User(
        id="user-1",
        username="alice",
        password_hash="hashed::s3cret",
        email="alice@example.com",
        birthday=None,
        favorite_movie_ids=("m1",),
    )


def _install(store: FakeCredentialStore, *, bearer_now: datetime | None = None) -> JwtTokenService:
    token_service = JwtTokenService(jwt_secret=SECRET)
    strategy = LocalAuthenticationStrategy(
        credential_store=store,
        password_hasher=FakePasswordHasher(),
    )
    app.dependency_overrides[get_login_use_case] = lambda: LoginUseCase(
        local_strategy=strategy,
        token_port=token_service,
    )
    clock = (lambda: bearer_now) if bearer_now else (lambda: datetime.now(timezone.utc))
    app.dependency_overrides[get_bearer_strategy] = lambda: BearerAuthenticationStrategy(
        credential_store=store,
        token_port=token_service,
        clock=clock,
    )
    app.dependency_overrides[get_list_users_use_case] = lambda: FakeListUsersUseCase()
    return token_service


def test_login_success_returns_public_user_and_seven_day_token():
    _install(FakeCredentialStore([_alice()]))
    client = TestClient(app)

    before = datetime.now(timezone.utc)
    response = client.post("/login", json={"Username": "alice", "Password": "s3cret"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["user"] == {
        "_id": "user-1",
        "Username": "alice",
        "Email": "alice@example.com",
        "Birthday": None,
        "FavoriteMovies": ["m1"],
    }
    claims = jwt.decode(payload["token"], SECRET, algorithms=["HS256"])
    assert claims["sub"] == "alice"
    assert claims["uid"] == "user-1"
    expected_exp = before + timedelta(days=7)
    assert abs(claims["exp"] - expected_exp.timestamp()) < 5
    assert "hashed::s3cret" not in response.text

    app.dependency_overrides.clear()


def test_login_wrong_password():
    _install(FakeCredentialStore([_alice()]))
    client = TestClient(app)

    response = client.post("/login", json={"Username": "alice", "Password": "wrong"})

    assert response.status_code == 400
    assert response.json() == {"message": "Incorrect password.", "code": "incorrect_password"}

    app.dependency_overrides.clear()


def test_login_unknown_user():
    _install(FakeCredentialStore([_alice()]))
    client = TestClient(app)

    response = client.post("/login", json={"Username": "ghost", "Password": "x"})

    assert response.status_code == 400
    assert response.json() == {"message": "User not found.", "code": "user_not_found"}

    app.dependency_overrides.clear()


def test_login_missing_fields_is_generic_error():
    _install(FakeCredentialStore([_alice()]))
    client = TestClient(app)

    response = client.post("/login", json={"Username": "alice"})
    empty = client.post("/login")

    assert response.status_code == 400
    assert response.json() == {"message": "Something is not right", "code": "malformed_credentials"}
    assert empty.status_code == 400
    assert empty.json()["message"] == "Something is not right"

    app.dependency_overrides.clear()


def test_login_malformed_body_is_generic_error():
    _install(FakeCredentialStore([_alice()]))
    client = TestClient(app)

    wrong_type = client.post("/login", json={"Username": 123, "Password": "x"})
    not_json = client.post(
        "/login",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    not_object = client.post("/login", json=["alice"])

    expected = {"message": "Something is not right", "code": "malformed_credentials"}
    for response in (wrong_type, not_json, not_object):
        assert response.status_code == 400
        assert response.json() == expected

    app.dependency_overrides.clear()


def test_login_store_outage_is_generic_error():
    _install(FakeCredentialStore([_alice()], unavailable=True))
    client = TestClient(app)

    response = client.post("/login", json={"Username": "alice", "Password": "s3cret"})

    assert response.status_code == 400
    assert response.json() == {"message": "Something is not right", "code": "store_unavailable"}

    app.dependency_overrides.clear()


def test_protected_route_accepts_issued_token():
    _install(FakeCredentialStore([_alice()]))
    client = TestClient(app)
    token = client.post("/login", json={"Username": "alice", "Password": "s3cret"}).json()["token"]

    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()[0]["Username"] == "alice"
    assert "password_hash" not in response.text

    app.dependency_overrides.clear()


def test_protected_route_without_token_is_unauthorized():
    _install(FakeCredentialStore([_alice()]))
    client = TestClient(app)

    response = client.get("/users")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json()["detail"]["code"] == "malformed_credentials"

    app.dependency_overrides.clear()


def test_protected_route_with_expired_token_is_unauthorized():
    store = FakeCredentialStore([_alice()])
    token_service = _install(store, bearer_now=datetime.now(timezone.utc) + timedelta(days=8))
    token = token_service.issue(user=_alice(), now=datetime.now(timezone.utc)).token
    client = TestClient(app)

    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == {"message": "Unauthorized", "code": "token_expired"}

    app.dependency_overrides.clear()


def test_protected_route_for_deleted_user_is_unauthorized():
    store = FakeCredentialStore([_alice()])
    token_service = _install(store)
    token = token_service.issue(user=_alice(), now=datetime.now(timezone.utc)).token
    store.users.clear()
    client = TestClient(app)

    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"]["code"] == "user_not_found"

    app.dependency_overrides.clear()


def test_protected_route_store_outage_is_service_unavailable():
    store = FakeCredentialStore([_alice()])
    token_service = _install(store)
    token = token_service.issue(user=_alice(), now=datetime.now(timezone.utc)).token
    store.unavailable = True
    client = TestClient(app)

    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 503

    app.dependency_overrides.clear()
