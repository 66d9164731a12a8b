from pydantic import Field
from typing import Optional
from datetime import datetime

from app.models.todo import TodoPriority
from app.schemas.common import CamelModel


class TodoCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: Optional[str] = None
    priority: TodoPriority = TodoPriority.MEDIUM
    due_date: Optional[datetime] = None


class TodoUpdate(CamelModel):
    """Partial update; omitted fields are left unchanged"""
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    description: Optional[str] = None
    priority: Optional[TodoPriority] = None
    due_date: Optional[datetime] = None
    completed: Optional[bool] = None


class TodoResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    completed: bool
    priority: str
    due_date: Optional[datetime] = None
    user_id: int
    created_at: datetime
    updated_at: datetime
