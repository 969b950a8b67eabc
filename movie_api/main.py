from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from movie_api.api.routers.auth import router as auth_router
from movie_api.api.routers.movies import router as movies_router
from movie_api.api.routers.site import router as site_router
from movie_api.api.routers.users import router as users_router
from movie_api.domain.exceptions import StoreUnavailableError
from movie_api.infrastructure.db.engine import create_schema, get_engine
from movie_api.shared.config import get_settings
from movie_api.shared.logging_config import ACCESS_LOGGER_NAME, configure_logging

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings)
    if settings.database_auto_create:
        create_schema(get_engine(settings.database_url, settings.store_timeout_seconds))
        logger.info("startup: schema_ready")
    yield


settings = get_settings()

app = FastAPI(title="Movie API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def access_log(request: Request, call_next):
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
        )


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    logger.error("store: unavailable path=%s", request.url.path)
    return JSONResponse(status_code=503, content={"message": "Service temporarily unavailable."})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("app: unhandled_error path=%s", request.url.path)
    return PlainTextResponse("Something broke!", status_code=500)


app.include_router(site_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(movies_router)
