from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from movie_api.api.auth import get_current_user
from movie_api.api.deps import (
    get_delete_movie_use_case,
    get_director_use_case,
    get_list_movies_by_genre_use_case,
    get_list_movies_use_case,
    get_movie_by_title_use_case,
)
from movie_api.api.mappers.responses import to_director_response, to_movie_response
from movie_api.api.schemas.movies import DirectorResponse, MovieResponse
from movie_api.api.schemas.users import MessageResponse
from movie_api.application.use_cases.delete_movie import DeleteMovieUseCase
from movie_api.application.use_cases.get_director import GetDirectorUseCase
from movie_api.application.use_cases.get_movie_by_title import GetMovieByTitleUseCase
from movie_api.application.use_cases.list_movies import ListMoviesUseCase
from movie_api.application.use_cases.list_movies_by_genre import ListMoviesByGenreUseCase
from movie_api.domain.entities.user import User
from movie_api.domain.exceptions import DirectorNotFoundError, MovieNotFoundError

router = APIRouter()


@router.get("/movies", response_model=list[MovieResponse])
def list_movies(
    _current_user: User = Depends(get_current_user),
    use_case: ListMoviesUseCase = Depends(get_list_movies_use_case),
):
    return [to_movie_response(movie) for movie in use_case.execute()]


@router.get("/movies/genre/{genre}", response_model=list[MovieResponse])
def list_movies_by_genre(
    genre: str,
    use_case: ListMoviesByGenreUseCase = Depends(get_list_movies_by_genre_use_case),
):
    try:
        movies = use_case.execute(genre_name=genre)
    except MovieNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return [to_movie_response(movie) for movie in movies]


@router.get("/movies/director/{director}", response_model=DirectorResponse)
def get_director(
    director: str,
    use_case: GetDirectorUseCase = Depends(get_director_use_case),
):
    try:
        return to_director_response(use_case.execute(director_name=director))
    except DirectorNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/movies/{title}", response_model=MovieResponse)
def get_movie_by_title(
    title: str,
    _current_user: User = Depends(get_current_user),
    use_case: GetMovieByTitleUseCase = Depends(get_movie_by_title_use_case),
):
    try:
        return to_movie_response(use_case.execute(title=title))
    except MovieNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete("/movies/{title}", response_model=MessageResponse)
def delete_movie(
    title: str,
    _current_user: User = Depends(get_current_user),
    use_case: DeleteMovieUseCase = Depends(get_delete_movie_use_case),
):
    try:
        use_case.execute(title=title)
    except MovieNotFoundError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return MessageResponse(message=f"{title} was deleted.")
