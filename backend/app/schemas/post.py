from pydantic import AliasChoices, Field, computed_field
from typing import Optional
from datetime import datetime

from app.schemas.board import BoardSummary
from app.schemas.common import CamelModel


class PostCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    is_guest: bool = False
    # Older clients send the display name as `author`
    author_name: Optional[str] = Field(
        None,
        max_length=100,
        validation_alias=AliasChoices("authorName", "author", "author_name"),
    )


class PostUpdate(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)


class PostResponse(CamelModel):
    id: int
    title: str
    content: str
    board_id: int
    author_id: Optional[int] = None
    author_name: str
    is_guest: bool
    views: int
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def author(self) -> str:
        return self.author_name


class PostDetailResponse(PostResponse):
    board: BoardSummary
