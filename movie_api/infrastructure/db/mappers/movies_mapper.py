from __future__ import annotations

import json
from typing import Any, Mapping

from movie_api.domain.entities.movie import Director, Genre, Movie


def _as_actors(value: Any) -> tuple[str, ...]:
    if value is None or value == "":
        return ()
    if isinstance(value, str):
        value = json.loads(value)
    return tuple(str(actor) for actor in value)


def map_row_to_movie(row: Mapping[str, Any]) -> Movie:
    return Movie(
        id=str(row["id"]),
        title=row["title"],
        description=row["description"],
        genre=Genre(
            name=row.get("genre_name"),
            description=row.get("genre_description"),
        ),
        director=Director(
            name=row.get("director_name"),
            bio=row.get("director_bio"),
        ),
        actors=_as_actors(row.get("actors")),
        image_path=row.get("image_path"),
        featured=bool(row.get("featured")),
    )
