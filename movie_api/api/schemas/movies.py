from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GenreResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, alias="Name")
    description: str | None = Field(default=None, alias="Description")


class DirectorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, alias="Name")
    bio: str | None = Field(default=None, alias="Bio")


class MovieResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str = Field(..., alias="Title")
    description: str = Field(..., alias="Description")
    genre: GenreResponse = Field(..., alias="Genre")
    director: DirectorResponse = Field(..., alias="Director")
    actors: list[str] = Field(default_factory=list, alias="Actors")
    image_path: str | None = Field(default=None, alias="ImagePath")
    featured: bool = Field(default=False, alias="Featured")
