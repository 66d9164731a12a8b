from pydantic import EmailStr, Field, field_validator
from typing import Optional

from app.schemas.common import CamelModel


def normalize_email(value: str) -> str:
    return value.strip().lower()


class UserRegister(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator('email', mode='after')
    @classmethod
    def lower_email(cls, v: str) -> str:
        return normalize_email(v)


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator('email', mode='after')
    @classmethod
    def lower_email(cls, v: str) -> str:
        return normalize_email(v)


class UserResponse(CamelModel):
    """Public view of an account; the password hash is never included"""
    id: int
    name: str
    email: str
    role: str
    avatar: Optional[str] = None

    @field_validator('role', mode='before')
    @classmethod
    def lower_role(cls, v):
        return v.lower() if isinstance(v, str) else v


class AuthResponse(CamelModel):
    message: str
    user: UserResponse
