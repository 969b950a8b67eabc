from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from movie_api.application.ports.users_port import UsersPort
from movie_api.domain.entities.user import User
from movie_api.domain.exceptions import UsernameAlreadyExistsError
from movie_api.infrastructure.db.errors import store_errors
from movie_api.infrastructure.db.mappers.users_mapper import map_row_to_user

_USER_COLUMNS = "id, username, password_hash, email, birthday, created_at"


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


class SqlUsersRepository(UsersPort):
    def __init__(self, engine):
        self._engine = engine

    def _load_user(self, conn, *, where: str, params: dict) -> User | None:
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE {where}
            LIMIT 1
        """
        row = conn.execute(text(sql), params).mappings().first()
        if row is None:
            return None
        favorites = conn.execute(
            text(
                """
                SELECT movie_id
                FROM favorite_movies
                WHERE user_id = :user_id
                ORDER BY position
                """
            ),
            {"user_id": row["id"]},
        ).scalars().all()
        return map_row_to_user(row, favorites)

    def _find_user_id(self, conn, *, username: str) -> str | None:
        return conn.execute(
            text("SELECT id FROM users WHERE username = :username LIMIT 1"),
            {"username": username},
        ).scalar_one_or_none()

    def find_user_by_username(self, *, username: str) -> User | None:
        with store_errors("find_user_by_username"):
            with self._engine.connect() as conn:
                return self._load_user(conn, where="username = :username", params={"username": username})

    def find_user_by_id(self, *, user_id: str) -> User | None:
        with store_errors("find_user_by_id"):
            with self._engine.connect() as conn:
                return self._load_user(conn, where="id = :user_id", params={"user_id": user_id})

    def list_users(self) -> list[User]:
        with store_errors("list_users"):
            with self._engine.connect() as conn:
                rows = conn.execute(
                    text(f"SELECT {_USER_COLUMNS} FROM users ORDER BY username")
                ).mappings().all()
                favorite_rows = conn.execute(
                    text(
                        """
                        SELECT user_id, movie_id
                        FROM favorite_movies
                        ORDER BY user_id, position
                        """
                    )
                ).mappings().all()

        favorites: dict[str, list[str]] = defaultdict(list)
        for row in favorite_rows:
            favorites[str(row["user_id"])].append(row["movie_id"])
        return [map_row_to_user(row, favorites.get(str(row["id"]), [])) for row in rows]

    def create_user(
        self,
        *,
        user_id: str,
        username: str,
        password_hash: str,
        email: str,
        birthday: date | None,
        created_at: datetime,
    ) -> User:
        sql = """
            INSERT INTO users (
                id, username, password_hash, email, birthday, created_at
            ) VALUES (
                :id, :username, :password_hash, :email, :birthday, :created_at
            )
        """
        params = {
            "id": user_id,
            "username": username,
            "password_hash": password_hash,
            "email": email,
            "birthday": _iso(birthday),
            "created_at": _iso(created_at),
        }
        try:
            with store_errors("create_user"):
                with self._engine.begin() as conn:
                    conn.execute(text(sql), params)
        except IntegrityError as exc:
            raise UsernameAlreadyExistsError(f"{username} already exists") from exc
        return User(
            id=user_id,
            username=username,
            password_hash=password_hash,
            email=email,
            birthday=birthday,
            favorite_movie_ids=(),
            created_at=created_at,
        )

    def update_user(
        self,
        *,
        username: str,
        new_username: str,
        password_hash: str,
        email: str,
        birthday: date | None,
    ) -> User | None:
        sql = """
            UPDATE users
            SET username = :new_username,
                password_hash = :password_hash,
                email = :email,
                birthday = :birthday
            WHERE id = :user_id
        """
        try:
            with store_errors("update_user"):
                with self._engine.begin() as conn:
                    user_id = self._find_user_id(conn, username=username)
                    if user_id is None:
                        return None
                    conn.execute(
                        text(sql),
                        {
                            "user_id": user_id,
                            "new_username": new_username,
                            "password_hash": password_hash,
                            "email": email,
                            "birthday": _iso(birthday),
                        },
                    )
                    return self._load_user(conn, where="id = :user_id", params={"user_id": user_id})
        except IntegrityError as exc:
            raise UsernameAlreadyExistsError(f"{new_username} already exists") from exc

    def delete_user(self, *, username: str) -> bool:
        with store_errors("delete_user"):
            with self._engine.begin() as conn:
                user_id = self._find_user_id(conn, username=username)
                if user_id is None:
                    return False
                conn.execute(text("DELETE FROM favorite_movies WHERE user_id = :user_id"), {"user_id": user_id})
                conn.execute(text("DELETE FROM users WHERE id = :user_id"), {"user_id": user_id})
        return True

    def add_favorite_movie(self, *, username: str, movie_id: str) -> User | None:
        with store_errors("add_favorite_movie"):
            with self._engine.begin() as conn:
                user_id = self._find_user_id(conn, username=username)
                if user_id is None:
                    return None
                exists = conn.execute(
                    text(
                        """
                        SELECT 1
                        FROM favorite_movies
                        WHERE user_id = :user_id
                          AND movie_id = :movie_id
                        """
                    ),
                    {"user_id": user_id, "movie_id": movie_id},
                ).first()
                if exists is None:
                    next_position = conn.execute(
                        text(
                            """
                            SELECT COALESCE(MAX(position), -1) + 1
                            FROM favorite_movies
                            WHERE user_id = :user_id
                            """
                        ),
                        {"user_id": user_id},
                    ).scalar_one()
                    conn.execute(
                        text(
                            """
                            INSERT INTO favorite_movies (user_id, movie_id, position)
                            VALUES (:user_id, :movie_id, :position)
                            """
                        ),
                        {"user_id": user_id, "movie_id": movie_id, "position": next_position},
                    )
                return self._load_user(conn, where="id = :user_id", params={"user_id": user_id})

    def remove_favorite_movie(self, *, username: str, movie_id: str) -> User | None:
        with store_errors("remove_favorite_movie"):
            with self._engine.begin() as conn:
                user_id = self._find_user_id(conn, username=username)
                if user_id is None:
                    return None
                conn.execute(
                    text(
                        """
                        DELETE FROM favorite_movies
                        WHERE user_id = :user_id
                          AND movie_id = :movie_id
                        """
                    ),
                    {"user_id": user_id, "movie_id": movie_id},
                )
                return self._load_user(conn, where="id = :user_id", params={"user_id": user_id})
