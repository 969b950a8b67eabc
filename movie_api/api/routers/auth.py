from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from movie_api.api.deps import get_login_use_case
from movie_api.api.mappers.responses import to_public_user_response
from movie_api.api.schemas.auth import AuthErrorResponse, LoginRequest, LoginResponse
from movie_api.application.dto.auth import LoginInput
from movie_api.application.use_cases.login import LoginUseCase
from movie_api.domain.entities.auth import AuthFailureReason
from movie_api.domain.exceptions import AuthenticationFailedError


router = APIRouter()

GENERIC_LOGIN_ERROR = "Something is not right"

LOGIN_ERROR_MESSAGES = {
    AuthFailureReason.INCORRECT_PASSWORD: "Incorrect password.",
    AuthFailureReason.USER_NOT_FOUND: "User not found.",
}


def _login_error(reason: AuthFailureReason) -> JSONResponse:
    body = AuthErrorResponse(
        message=LOGIN_ERROR_MESSAGES.get(reason, GENERIC_LOGIN_ERROR),
        code=reason.value,
    )
    return JSONResponse(status_code=400, content=body.model_dump())


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": AuthErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": LoginRequest.model_json_schema(by_alias=True)}},
        },
    },
)
async def login(
    request: Request,
    use_case: LoginUseCase = Depends(get_login_use_case),
):
    # Unparseable bodies are one more malformed-credentials failure.
    try:
        req = LoginRequest.model_validate_json(await request.body())
    except ValidationError:
        return _login_error(AuthFailureReason.MALFORMED_CREDENTIALS)

    try:
        output = await run_in_threadpool(
            use_case.execute,
            LoginInput(username=req.username, password=req.password),
        )
    except AuthenticationFailedError as exc:
        return _login_error(exc.reason)

    return LoginResponse(
        user=to_public_user_response(output.user),
        token=output.token,
    )
