from pydantic import AliasChoices, Field
from typing import Optional
from datetime import datetime

from app.schemas.common import CamelModel


class CommentCreate(CamelModel):
    post_id: int
    content: str = Field(..., min_length=1)
    is_guest: bool = False
    author_name: Optional[str] = Field(
        None,
        max_length=100,
        validation_alias=AliasChoices("authorName", "author", "author_name"),
    )


class CommentResponse(CamelModel):
    id: int
    post_id: int
    content: str
    author_id: Optional[int] = None
    author_name: str
    is_guest: bool
    created_at: datetime
    updated_at: datetime
