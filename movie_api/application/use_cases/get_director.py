from __future__ import annotations

from movie_api.application.ports.movies_port import MoviesPort
from movie_api.domain.entities.movie import Director
from movie_api.domain.exceptions import DirectorNotFoundError


class GetDirectorUseCase:
    def __init__(self, *, movies_port: MoviesPort):
        self._movies_port = movies_port

    def execute(self, *, director_name: str) -> Director:
        movie = self._movies_port.get_movie_by_director(director_name=director_name)
        if movie is None or not movie.director.name:
            raise DirectorNotFoundError("Director not found")
        return movie.director
