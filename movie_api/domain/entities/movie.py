from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Genre:
    name: str | None
    description: str | None


@dataclass(frozen=True)
class Director:
    name: str | None
    bio: str | None


@dataclass(frozen=True)
class Movie:
    id: str
    title: str
    description: str
    genre: Genre
    director: Director
    actors: tuple[str, ...] = field(default_factory=tuple)
    image_path: str | None = None
    featured: bool = False
