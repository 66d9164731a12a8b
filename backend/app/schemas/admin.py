from pydantic import EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime

from app.models.user import UserRole
from app.schemas.auth import normalize_email
from app.schemas.common import CamelModel
from app.schemas.guestbook import GuestbookResponse


def parse_role(v):
    if v is None:
        return v
    role = UserRole.parse(v) if isinstance(v, str) else None
    if role is None:
        raise ValueError("role must be 'user' or 'admin'")
    return role


# ==================== User Management Schemas ====================

class AdminUserCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    role: UserRole = UserRole.USER
    is_active: bool = True

    @field_validator('email', mode='after')
    @classmethod
    def lower_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator('role', mode='before')
    @classmethod
    def validate_role(cls, v):
        return parse_role(v)


class AdminUserUpdate(CamelModel):
    """Partial update; omitted fields are left unchanged"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None

    @field_validator('email', mode='after')
    @classmethod
    def lower_email(cls, v: Optional[str]) -> Optional[str]:
        return normalize_email(v) if v else v

    @field_validator('role', mode='before')
    @classmethod
    def validate_role(cls, v):
        return parse_role(v)


class AdminUserResponse(CamelModel):
    """User as seen by an admin"""
    id: int
    name: str
    email: str
    role: str
    avatar: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @field_validator('role', mode='before')
    @classmethod
    def lower_role(cls, v):
        return v.lower() if isinstance(v, str) else v


# ==================== Dashboard Schemas ====================

class RecentUser(CamelModel):
    id: int
    name: str
    email: str
    created_at: datetime


class RecentPost(CamelModel):
    id: int
    title: str
    author_name: str
    created_at: datetime


class UserStats(CamelModel):
    total: int
    active: int
    admins: int
    recent: List[RecentUser]


class PostStats(CamelModel):
    total: int
    recent: List[RecentPost]


class GuestbookStats(CamelModel):
    total: int
    pending: int
    recent: List[GuestbookResponse]


class TodoStats(CamelModel):
    total: int
    completed: int


class AdminStatsResponse(CamelModel):
    """Dashboard KPI statistics"""
    users: UserStats
    posts: PostStats
    guestbook: GuestbookStats
    todos: TodoStats


class ApproveAllResponse(CamelModel):
    message: str
    approved: int
