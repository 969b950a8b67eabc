from __future__ import annotations

from sqlalchemy import JSON, Boolean, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from movie_api.infrastructure.db.engine import Base


class MovieModel(Base):
    __tablename__ = "movies"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    genre_name: Mapped[str | None] = mapped_column(Text, nullable=True, index=True)
    genre_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    director_name: Mapped[str | None] = mapped_column(Text, nullable=True, index=True)
    director_bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    actors: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    image_path: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
