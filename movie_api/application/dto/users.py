from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class RegisterUserInput:
    username: str
    password: str
    email: str
    birthday: date | None


@dataclass(frozen=True)
class UpdateUserInput:
    acting_username: str
    username: str
    new_username: str
    password: str
    email: str
    birthday: date | None


@dataclass(frozen=True)
class DeleteUserInput:
    acting_username: str
    username: str


@dataclass(frozen=True)
class FavoriteMovieInput:
    acting_username: str
    username: str
    movie_id: str
