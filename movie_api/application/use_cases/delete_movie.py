from __future__ import annotations

import logging

from movie_api.application.ports.movies_port import MoviesPort
from movie_api.domain.exceptions import MovieNotFoundError

logger = logging.getLogger(__name__)


class DeleteMovieUseCase:
    def __init__(self, *, movies_port: MoviesPort):
        self._movies_port = movies_port

    def execute(self, *, title: str) -> None:
        if not self._movies_port.delete_movie_by_title(title=title):
            raise MovieNotFoundError(f"{title} was not found.")
        logger.info("delete_movie: deleted title=%s", title)
