from __future__ import annotations

from datetime import date

from fastapi.testclient import TestClient

from movie_api.api.auth import get_current_user
from movie_api.api.deps import (
    get_bearer_strategy,
    get_add_favorite_movie_use_case,
    get_delete_user_use_case,
    get_list_favorite_movies_use_case,
    get_register_user_use_case,
    get_update_user_use_case,
)
from movie_api.application.use_cases.add_favorite_movie import AddFavoriteMovieUseCase
from movie_api.application.use_cases.authenticate_bearer import BearerAuthenticationStrategy
from movie_api.application.use_cases.delete_user import DeleteUserUseCase
from movie_api.application.use_cases.list_favorite_movies import ListFavoriteMoviesUseCase
from movie_api.application.use_cases.register_user import RegisterUserUseCase
from movie_api.application.use_cases.update_user import UpdateUserUseCase
from movie_api.domain.entities.user import User
from movie_api.infrastructure.security.token_service import JwtTokenService
from movie_api.main import app

from test_users_use_cases import FakePasswordHasher, FakeUsersPort


def _alice() -> User:
    return User(
        id="user-1",
        username="alice",
        password_hash="hashed::s3cret",
        email="alice@example.com",
        birthday=date(1990, 5, 17),
        favorite_movie_ids=("m1",),
    )


def _install(users_port: FakeUsersPort, *, current_user: User | None = None) -> None:
    hasher = FakePasswordHasher()
    app.dependency_overrides[get_current_user] = lambda: current_user or _alice()
    app.dependency_overrides[get_register_user_use_case] = lambda: RegisterUserUseCase(
        users_port=users_port,
        password_hasher=hasher,
    )
    app.dependency_overrides[get_update_user_use_case] = lambda: UpdateUserUseCase(
        users_port=users_port,
        password_hasher=hasher,
    )
    app.dependency_overrides[get_delete_user_use_case] = lambda: DeleteUserUseCase(users_port=users_port)
    app.dependency_overrides[get_list_favorite_movies_use_case] = lambda: ListFavoriteMoviesUseCase(
        users_port=users_port
    )
    app.dependency_overrides[get_add_favorite_movie_use_case] = lambda: AddFavoriteMovieUseCase(
        users_port=users_port
    )


def test_register_user_returns_created_user_without_hash():
    users_port = FakeUsersPort()
    _install(users_port)
    client = TestClient(app)

    response = client.post(
        "/users",
        json={
            "Username": "bobby1",
            "Password": "pw",
            "Email": "bob@example.com",
            "Birthday": "1991-02-03",
        },
    )

    assert response.status_code == 201
    payload = response.json()
    assert payload["Username"] == "bobby1"
    assert payload["Birthday"] == "1991-02-03"
    assert payload["FavoriteMovies"] == []
    assert "Password" not in payload
    assert users_port.find_user_by_username(username="bobby1").password_hash == "hashed::pw"

    app.dependency_overrides.clear()


def test_register_duplicate_username_is_rejected():
    existing = User(
        id="user-2",
        username="bobby1",
        password_hash="hashed::pw",
        email="bob@example.com",
        birthday=None,
    )
    _install(FakeUsersPort([existing]))
    client = TestClient(app)

    response = client.post(
        "/users",
        json={"Username": "bobby1", "Password": "pw", "Email": "bob@example.com"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "bobby1 already exists"

    app.dependency_overrides.clear()


def test_register_validation_errors():
    _install(FakeUsersPort())
    client = TestClient(app)

    short = client.post("/users", json={"Username": "bob", "Password": "pw", "Email": "bob@example.com"})
    symbols = client.post("/users", json={"Username": "bob_by!", "Password": "pw", "Email": "bob@example.com"})
    bad_email = client.post("/users", json={"Username": "bobby1", "Password": "pw", "Email": "nope"})
    no_password = client.post("/users", json={"Username": "bobby1", "Password": "", "Email": "b@example.com"})

    assert short.status_code == 422
    assert symbols.status_code == 422
    assert bad_email.status_code == 422
    assert no_password.status_code == 422

    app.dependency_overrides.clear()


def test_update_other_user_is_forbidden():
    other = User(
        id="user-2",
        username="bobby1",
        password_hash="hashed::pw",
        email="bob@example.com",
        birthday=None,
    )
    _install(FakeUsersPort([_alice(), other]))
    client = TestClient(app)

    response = client.put(
        "/users/bobby1",
        json={"Username": "bobby2", "Password": "pw", "Email": "bob@example.com"},
    )

    assert response.status_code == 403
    assert response.json()["detail"] == "Unauthorized"

    app.dependency_overrides.clear()


def test_update_own_profile_rehashes_password():
    alice = User(
        id="user-1",
        username="alice1",
        password_hash="hashed::s3cret",
        email="alice@example.com",
        birthday=None,
    )
    users_port = FakeUsersPort([alice])
    _install(users_port, current_user=alice)
    client = TestClient(app)

    response = client.put(
        "/users/alice1",
        json={"Username": "alice2", "Password": "n3w", "Email": "alice@new.example.com"},
    )

    assert response.status_code == 200
    assert response.json()["Username"] == "alice2"
    assert response.json()["Email"] == "alice@new.example.com"
    assert users_port.find_user_by_username(username="alice2").password_hash == "hashed::n3w"

    app.dependency_overrides.clear()


def test_delete_user_messages():
    users_port = FakeUsersPort([_alice()])
    _install(users_port)
    client = TestClient(app)

    deleted = client.delete("/users/alice")
    missing = client.delete("/users/alice")

    assert deleted.status_code == 200
    assert deleted.json() == {"message": "alice was deleted."}
    assert missing.status_code == 400
    assert missing.json()["detail"] == "alice was not found."

    app.dependency_overrides.clear()


def test_favorite_movies_list_and_add():
    users_port = FakeUsersPort([_alice()])
    _install(users_port)
    client = TestClient(app)

    added = client.post("/users/alice/movies/m2")
    again = client.post("/users/alice/movies/m2")
    listed = client.get("/users/alice/favoriteMovies")
    missing = client.get("/users/ghost/favoriteMovies")

    assert added.status_code == 200
    assert added.json()["FavoriteMovies"] == ["m1", "m2"]
    assert again.json()["FavoriteMovies"] == ["m1", "m2"]
    assert listed.json() == ["m1", "m2"]
    assert missing.status_code == 400
    assert missing.json()["detail"] == "ghost was not found."

    app.dependency_overrides.clear()


def test_user_routes_require_valid_token():
    users_port = FakeUsersPort([_alice()])
    _install(users_port)
    del app.dependency_overrides[get_current_user]
    app.dependency_overrides[get_bearer_strategy] = lambda: BearerAuthenticationStrategy(
        credential_store=users_port,
        token_port=JwtTokenService(jwt_secret="router-secret"),
    )
    client = TestClient(app)

    response = client.delete("/users/alice", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 401
    assert response.json()["detail"]["code"] == "token_invalid"
    assert users_port.find_user_by_username(username="alice") is not None

    app.dependency_overrides.clear()
