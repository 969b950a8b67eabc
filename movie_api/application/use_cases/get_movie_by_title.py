from __future__ import annotations

from movie_api.application.ports.movies_port import MoviesPort
from movie_api.domain.entities.movie import Movie
from movie_api.domain.exceptions import MovieNotFoundError


class GetMovieByTitleUseCase:
    def __init__(self, *, movies_port: MoviesPort):
        self._movies_port = movies_port

    def execute(self, *, title: str) -> Movie:
        movie = self._movies_port.get_movie_by_title(title=title)
        if movie is None:
            raise MovieNotFoundError("Movie not found")
        return movie
