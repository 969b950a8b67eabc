from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

USERNAME_PATTERN = r"^[A-Za-z0-9]+$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserWriteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., alias="Username", min_length=5, max_length=64, pattern=USERNAME_PATTERN)
    password: str = Field(..., alias="Password", min_length=1, max_length=256)
    email: str = Field(..., alias="Email", min_length=3, max_length=255, pattern=EMAIL_PATTERN)
    birthday: date | None = Field(default=None, alias="Birthday")


class MessageResponse(BaseModel):
    message: str
