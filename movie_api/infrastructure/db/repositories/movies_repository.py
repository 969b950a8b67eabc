from __future__ import annotations

from sqlalchemy import text

from movie_api.application.ports.movies_port import MoviesPort
from movie_api.domain.entities.movie import Movie
from movie_api.infrastructure.db.errors import store_errors
from movie_api.infrastructure.db.mappers.movies_mapper import map_row_to_movie

_MOVIE_COLUMNS = """
    id, title, description, genre_name, genre_description,
    director_name, director_bio, actors, image_path, featured
"""


class SqlMoviesRepository(MoviesPort):
    def __init__(self, engine):
        self._engine = engine

    def list_movies(self) -> list[Movie]:
        with store_errors("list_movies"):
            with self._engine.connect() as conn:
                rows = conn.execute(
                    text(f"SELECT {_MOVIE_COLUMNS} FROM movies ORDER BY title")
                ).mappings().all()
        return [map_row_to_movie(row) for row in rows]

    def get_movie_by_title(self, *, title: str) -> Movie | None:
        sql = f"""
            SELECT {_MOVIE_COLUMNS}
            FROM movies
            WHERE title = :title
            LIMIT 1
        """
        with store_errors("get_movie_by_title"):
            with self._engine.connect() as conn:
                row = conn.execute(text(sql), {"title": title}).mappings().first()
        if row is None:
            return None
        return map_row_to_movie(row)

    def list_movies_by_genre(self, *, genre_name: str) -> list[Movie]:
        sql = f"""
            SELECT {_MOVIE_COLUMNS}
            FROM movies
            WHERE genre_name = :genre_name
            ORDER BY title
        """
        with store_errors("list_movies_by_genre"):
            with self._engine.connect() as conn:
                rows = conn.execute(text(sql), {"genre_name": genre_name}).mappings().all()
        return [map_row_to_movie(row) for row in rows]

    def get_movie_by_director(self, *, director_name: str) -> Movie | None:
        sql = f"""
            SELECT {_MOVIE_COLUMNS}
            FROM movies
            WHERE director_name = :director_name
            ORDER BY title
            LIMIT 1
        """
        with store_errors("get_movie_by_director"):
            with self._engine.connect() as conn:
                row = conn.execute(text(sql), {"director_name": director_name}).mappings().first()
        if row is None:
            return None
        return map_row_to_movie(row)

    def delete_movie_by_title(self, *, title: str) -> bool:
        with store_errors("delete_movie_by_title"):
            with self._engine.begin() as conn:
                result = conn.execute(text("DELETE FROM movies WHERE title = :title"), {"title": title})
        return result.rowcount > 0
