from __future__ import annotations

from movie_api.api.schemas.auth import PublicUserResponse
from movie_api.api.schemas.movies import DirectorResponse, GenreResponse, MovieResponse
from movie_api.application.dto.auth import PublicUserOutput
from movie_api.domain.entities.movie import Director, Movie


def to_public_user_response(user: PublicUserOutput) -> PublicUserResponse:
    return PublicUserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        birthday=user.birthday,
        favorite_movies=list(user.favorite_movie_ids),
    )


def to_director_response(director: Director) -> DirectorResponse:
    return DirectorResponse(name=director.name, bio=director.bio)


def to_movie_response(movie: Movie) -> MovieResponse:
    return MovieResponse(
        id=movie.id,
        title=movie.title,
        description=movie.description,
        genre=GenreResponse(name=movie.genre.name, description=movie.genre.description),
        director=to_director_response(movie.director),
        actors=list(movie.actors),
        image_path=movie.image_path,
        featured=movie.featured,
    )
