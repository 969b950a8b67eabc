from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str | None = Field(default=None, alias="Username")
    password: str | None = Field(default=None, alias="Password")


class PublicUserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    username: str = Field(..., alias="Username")
    email: str = Field(..., alias="Email")
    birthday: date | None = Field(default=None, alias="Birthday")
    favorite_movies: list[str] = Field(default_factory=list, alias="FavoriteMovies")


class LoginResponse(BaseModel):
    user: PublicUserResponse
    token: str


class AuthErrorResponse(BaseModel):
    message: str
    code: str
