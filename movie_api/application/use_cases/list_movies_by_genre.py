from __future__ import annotations

from movie_api.application.ports.movies_port import MoviesPort
from movie_api.domain.entities.movie import Movie
from movie_api.domain.exceptions import MovieNotFoundError


class ListMoviesByGenreUseCase:
    def __init__(self, *, movies_port: MoviesPort):
        self._movies_port = movies_port

    def execute(self, *, genre_name: str) -> list[Movie]:
        movies = self._movies_port.list_movies_by_genre(genre_name=genre_name)
        if not movies:
            raise MovieNotFoundError("No movies found in that genre")
        return movies
