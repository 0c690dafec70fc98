from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from sessionauth.domain.users.entities import User

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    if not _EMAIL_RE.match(value):
        raise PydanticCustomError(
            "email_invalid",
            "Email address is not valid",
            {"pattern": _EMAIL_RE.pattern},
        )
    return value


class RegisterRequestDTO(BaseModel):
    fullname: str = Field(min_length=1, max_length=128)
    email: str = Field(max_length=320)
    password: str = Field(min_length=8, max_length=128)
    confirm_password: str = Field(alias="confirmPassword", max_length=128)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("fullname")
    @classmethod
    def validate_fullname(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("missing", "Full name cannot be empty", {})
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)


class LoginRequestDTO(BaseModel):
    email: str = Field(max_length=320)
    password: str = Field(min_length=1, max_length=128)  # No length policy on login

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)


class UserDTO(BaseModel):
    id: int
    fullname: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(id=user.id, fullname=user.fullname, email=user.email)


class AuthUserResponseDTO(BaseModel):
    user: UserDTO


class RefreshResponseDTO(BaseModel):
    access_token: str


class MessageDTO(BaseModel):
    message: str
