from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from movie_api.api.auth import get_current_user
from movie_api.api.deps import (
    get_add_favorite_movie_use_case,
    get_delete_user_use_case,
    get_list_favorite_movies_use_case,
    get_list_users_use_case,
    get_register_user_use_case,
    get_remove_favorite_movie_use_case,
    get_update_user_use_case,
)
from movie_api.api.mappers.responses import to_public_user_response
from movie_api.api.schemas.auth import PublicUserResponse
from movie_api.api.schemas.users import MessageResponse, UserWriteRequest
from movie_api.application.dto.users import (
    DeleteUserInput,
    FavoriteMovieInput,
    RegisterUserInput,
    UpdateUserInput,
)
from movie_api.application.use_cases.add_favorite_movie import AddFavoriteMovieUseCase
from movie_api.application.use_cases.delete_user import DeleteUserUseCase
from movie_api.application.use_cases.list_favorite_movies import ListFavoriteMoviesUseCase
from movie_api.application.use_cases.list_users import ListUsersUseCase
from movie_api.application.use_cases.register_user import RegisterUserUseCase
from movie_api.application.use_cases.remove_favorite_movie import RemoveFavoriteMovieUseCase
from movie_api.application.use_cases.update_user import UpdateUserUseCase
from movie_api.domain.entities.user import User
from movie_api.domain.exceptions import (
    ForbiddenUserError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/users", response_model=list[PublicUserResponse])
def list_users(
    _current_user: User = Depends(get_current_user),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    return [to_public_user_response(user) for user in use_case.execute()]


@router.post("/users", response_model=PublicUserResponse, status_code=201)
def register_user(
    req: UserWriteRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    try:
        output = use_case.execute(
            RegisterUserInput(
                username=req.username,
                password=req.password,
                email=req.email,
                birthday=req.birthday,
            )
        )
    except UsernameAlreadyExistsError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return to_public_user_response(output)


@router.put("/users/{username}", response_model=PublicUserResponse)
def update_user(
    username: str,
    req: UserWriteRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
):
    try:
        output = use_case.execute(
            UpdateUserInput(
                acting_username=current_user.username,
                username=username,
                new_username=req.username,
                password=req.password,
                email=req.email,
                birthday=req.birthday,
            )
        )
    except ForbiddenUserError as exc:
        logger.warning(
            "users_router: forbidden_update acting=%s target=%s",
            current_user.username,
            username,
        )
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except UsernameAlreadyExistsError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return to_public_user_response(output)


@router.delete("/users/{username}", response_model=MessageResponse)
def delete_user(
    username: str,
    current_user: User = Depends(get_current_user),
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
):
    try:
        use_case.execute(DeleteUserInput(acting_username=current_user.username, username=username))
    except ForbiddenUserError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return MessageResponse(message=f"{username} was deleted.")


@router.get("/users/{username}/favoriteMovies", response_model=list[str])
def list_favorite_movies(
    username: str,
    _current_user: User = Depends(get_current_user),
    use_case: ListFavoriteMoviesUseCase = Depends(get_list_favorite_movies_use_case),
):
    try:
        return use_case.execute(username=username)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/users/{username}/movies/{movie_id}", response_model=PublicUserResponse)
def add_favorite_movie(
    username: str,
    movie_id: str,
    current_user: User = Depends(get_current_user),
    use_case: AddFavoriteMovieUseCase = Depends(get_add_favorite_movie_use_case),
):
    try:
        output = use_case.execute(
            FavoriteMovieInput(
                acting_username=current_user.username,
                username=username,
                movie_id=movie_id,
            )
        )
    except ForbiddenUserError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return to_public_user_response(output)


@router.delete("/users/{username}/movies/{movie_id}", response_model=PublicUserResponse)
def remove_favorite_movie(
    username: str,
    movie_id: str,
    current_user: User = Depends(get_current_user),
    use_case: RemoveFavoriteMovieUseCase = Depends(get_remove_favorite_movie_use_case),
):
    try:
        output = use_case.execute(
            FavoriteMovieInput(
                acting_username=current_user.username,
                username=username,
                movie_id=movie_id,
            )
        )
    except ForbiddenUserError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return to_public_user_response(output)
