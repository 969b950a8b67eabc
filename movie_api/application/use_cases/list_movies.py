from __future__ import annotations

from movie_api.application.ports.movies_port import MoviesPort
from movie_api.domain.entities.movie import Movie


class ListMoviesUseCase:
    def __init__(self, *, movies_port: MoviesPort):
        self._movies_port = movies_port

    def execute(self) -> list[Movie]:
        return self._movies_port.list_movies()
