from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from movie_api.application.use_cases.add_favorite_movie import AddFavoriteMovieUseCase
from movie_api.application.use_cases.authenticate_bearer import BearerAuthenticationStrategy
from movie_api.application.use_cases.authenticate_local import LocalAuthenticationStrategy
from movie_api.application.use_cases.delete_movie import DeleteMovieUseCase
from movie_api.application.use_cases.delete_user import DeleteUserUseCase
from movie_api.application.use_cases.get_director import GetDirectorUseCase
from movie_api.application.use_cases.get_movie_by_title import GetMovieByTitleUseCase
from movie_api.application.use_cases.list_favorite_movies import ListFavoriteMoviesUseCase
from movie_api.application.use_cases.list_movies import ListMoviesUseCase
from movie_api.application.use_cases.list_movies_by_genre import ListMoviesByGenreUseCase
from movie_api.application.use_cases.list_users import ListUsersUseCase
from movie_api.application.use_cases.login import LoginUseCase
from movie_api.application.use_cases.register_user import RegisterUserUseCase
from movie_api.application.use_cases.remove_favorite_movie import RemoveFavoriteMovieUseCase
from movie_api.application.use_cases.update_user import UpdateUserUseCase
from movie_api.infrastructure.db.engine import get_engine
from movie_api.infrastructure.db.repositories.movies_repository import SqlMoviesRepository
from movie_api.infrastructure.db.repositories.users_repository import SqlUsersRepository
from movie_api.infrastructure.security.password_hasher import PasswordHasher
from movie_api.infrastructure.security.token_service import JwtTokenService
from movie_api.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.database_url:
        raise HTTPException(status_code=500, detail="DATABASE_URL is required.")
    return get_engine(settings.database_url, settings.store_timeout_seconds)


def _get_users_repository() -> SqlUsersRepository:
    return SqlUsersRepository(_get_db_engine())


def _get_movies_repository() -> SqlMoviesRepository:
    return SqlMoviesRepository(_get_db_engine())


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasher:
    settings = get_settings()
    return PasswordHasher(rounds=settings.bcrypt_rounds)


@lru_cache(maxsize=1)
def _get_token_service() -> JwtTokenService:
    settings = get_settings()
    if not settings.jwt_secret:
        raise HTTPException(status_code=500, detail="JWT_SECRET is required.")
    return JwtTokenService(
        jwt_secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_days=settings.jwt_ttl_days,
    )


def get_local_strategy() -> LocalAuthenticationStrategy:
    return LocalAuthenticationStrategy(
        credential_store=_get_users_repository(),
        password_hasher=_get_password_hasher(),
    )


def get_bearer_strategy() -> BearerAuthenticationStrategy:
    return BearerAuthenticationStrategy(
        credential_store=_get_users_repository(),
        token_port=_get_token_service(),
    )


def get_login_use_case() -> LoginUseCase:
    return LoginUseCase(
        local_strategy=get_local_strategy(),
        token_port=_get_token_service(),
    )


def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(
        users_port=_get_users_repository(),
        password_hasher=_get_password_hasher(),
    )


def get_update_user_use_case() -> UpdateUserUseCase:
    return UpdateUserUseCase(
        users_port=_get_users_repository(),
        password_hasher=_get_password_hasher(),
    )


def get_delete_user_use_case() -> DeleteUserUseCase:
    return DeleteUserUseCase(users_port=_get_users_repository())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(users_port=_get_users_repository())


def get_list_favorite_movies_use_case() -> ListFavoriteMoviesUseCase:
    return ListFavoriteMoviesUseCase(users_port=_get_users_repository())


def get_add_favorite_movie_use_case() -> AddFavoriteMovieUseCase:
    return AddFavoriteMovieUseCase(users_port=_get_users_repository())


def get_remove_favorite_movie_use_case() -> RemoveFavoriteMovieUseCase:
    return RemoveFavoriteMovieUseCase(users_port=_get_users_repository())


def get_list_movies_use_case() -> ListMoviesUseCase:
    return ListMoviesUseCase(movies_port=_get_movies_repository())


def get_movie_by_title_use_case() -> GetMovieByTitleUseCase:
    return GetMovieByTitleUseCase(movies_port=_get_movies_repository())


def get_list_movies_by_genre_use_case() -> ListMoviesByGenreUseCase:
    return ListMoviesByGenreUseCase(movies_port=_get_movies_repository())


def get_director_use_case() -> GetDirectorUseCase:
    return GetDirectorUseCase(movies_port=_get_movies_repository())


def get_delete_movie_use_case() -> DeleteMovieUseCase:
    return DeleteMovieUseCase(movies_port=_get_movies_repository())
