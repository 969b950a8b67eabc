from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Mapping

from movie_api.domain.entities.user import User


def _as_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _as_datetime(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def map_row_to_user(row: Mapping[str, Any], favorite_movie_ids: Iterable[str] = ()) -> User:
    return User(
        id=str(row["id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        email=row["email"],
        birthday=_as_date(row.get("birthday")),
        favorite_movie_ids=tuple(str(movie_id) for movie_id in favorite_movie_ids),
        created_at=_as_datetime(row.get("created_at")),
    )
