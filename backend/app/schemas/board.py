from pydantic import Field
from typing import Optional
from datetime import datetime

from app.models.board import DEFAULT_BOARD_CATEGORY
from app.schemas.common import CamelModel


class BoardCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: Optional[str] = Field(None, max_length=100)
    allow_guest: bool = True

    @property
    def category_or_default(self) -> str:
        return self.category or DEFAULT_BOARD_CATEGORY


class BoardUpdate(CamelModel):
    """Partial update; omitted fields are left unchanged"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    allow_guest: Optional[bool] = None
    is_active: Optional[bool] = None


class BoardResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    category: str
    allow_guest: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime


class AdminBoardResponse(BoardResponse):
    post_count: int = 0


class BoardSummary(CamelModel):
    """Board reference embedded in post responses"""
    id: int
    title: str
    allow_guest: bool
