from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.common import CamelModel


class GuestbookCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    message: str = Field(..., min_length=1)

    @field_validator('email', mode='before')
    @classmethod
    def blank_email_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class GuestbookApprovalUpdate(CamelModel):
    is_approved: bool


class GuestbookResponse(CamelModel):
    id: int
    name: str
    email: Optional[str] = None
    message: str
    is_approved: bool
    created_at: datetime
