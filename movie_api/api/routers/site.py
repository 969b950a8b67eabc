from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, PlainTextResponse

router = APIRouter()

DOCUMENTATION_PATH = Path(__file__).resolve().parent.parent / "static" / "documentation.html"


@router.get("/", response_class=PlainTextResponse)
def welcome():
    return "Welcome to my movie api"


@router.get("/documentation", response_class=FileResponse)
def documentation():
    return FileResponse(DOCUMENTATION_PATH, media_type="text/html")
