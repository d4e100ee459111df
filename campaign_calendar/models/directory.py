from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from campaign_calendar.constants import AVAILABLE_EMOJIS


class User(BaseModel):
    id: str
    name: str
    email: EmailStr
    avatar: Optional[str] = None  # emoji or image URL


class Department(BaseModel):
    id: str
    name: str


class UserCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    avatar: Optional[str] = None

    @field_validator("avatar")
    def _validate_avatar(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value in AVAILABLE_EMOJIS:
            return value
        if value.startswith(("http://", "https://")):
            return value
        raise ValueError("avatar must be one of the available emojis or an http(s) URL")


class DepartmentCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
