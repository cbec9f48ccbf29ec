import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


def normalize_user_name(v: str) -> str:
    """Trim and length-check a username (2-50 characters)."""
    v = v.strip()
    if len(v) < 2:
        raise ValueError("Username must be at least 2 characters")
    if len(v) > 50:
        raise ValueError("Username cannot exceed 50 characters")
    return v


class SignupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="userName")
    email: EmailStr
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters")
    role: Literal["user", "talent"] = "user"

    @field_validator("user_name")
    @classmethod
    def validate_user_name(cls, v: str) -> str:
        return normalize_user_name(v)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            if not EMAIL_PATTERN.match(v):
                raise ValueError("Please use a valid email address")
        return v


class UsernameQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="userName")

    @field_validator("user_name")
    @classmethod
    def validate_user_name(cls, v: str) -> str:
        return normalize_user_name(v)
