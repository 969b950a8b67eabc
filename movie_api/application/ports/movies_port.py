from __future__ import annotations

from typing import Protocol

from movie_api.domain.entities.movie import Movie


class MoviesPort(Protocol):
    def list_movies(self) -> list[Movie]:
        ...

    def get_movie_by_title(self, *, title: str) -> Movie | None:
        ...

    def list_movies_by_genre(self, *, genre_name: str) -> list[Movie]:
        ...

    def get_movie_by_director(self, *, director_name: str) -> Movie | None:
        ...

    def delete_movie_by_title(self, *, title: str) -> bool:
        ...
