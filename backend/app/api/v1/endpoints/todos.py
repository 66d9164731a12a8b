"""
Todo endpoints.

Todos are private: every query is scoped to the current user, so another
user's todo is indistinguishable from a missing one (404).
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from app.core.database import get_db
from app.core.exceptions import TodoNotFoundError
from app.core.logging_config import logger
from app.models.todo import Todo
from app.models.user import User
from app.modules.auth.dependencies import get_current_user
from app.schemas.common import MessageResponse
from app.schemas.todo import TodoCreate, TodoUpdate, TodoResponse
from app.utils.pagination import PaginationParams, pagination_params
from app.utils.validators import parse_id

router = APIRouter()

# Columns that may be cleared with an explicit null
NULLABLE_FIELDS = {"description", "due_date"}


async def get_owned_todo(db: AsyncSession, todo_id: int, user: User) -> Todo:
    todo = await db.scalar(
        select(Todo).where(Todo.id == todo_id, Todo.user_id == user.id)
    )
    if not todo:
        raise TodoNotFoundError(todo_id)
    return todo


@router.get("", response_model=List[TodoResponse])
async def list_todos(
    pagination: PaginationParams = Depends(pagination_params),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """List the current user's todos, newest first"""
    query = (
        select(Todo)
        .where(Todo.user_id == current_user.id)
        .order_by(Todo.created_at.desc(), Todo.id.desc())
    )
    result = await db.execute(pagination.apply(query))
    return result.scalars().all()


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
async def create_todo(
    todo_data: TodoCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    todo = Todo(
        title=todo_data.title,
        description=todo_data.description or None,
        priority=todo_data.priority.value,
        due_date=todo_data.due_date,
        user_id=current_user.id,
    )
    db.add(todo)
    await db.commit()
    await db.refresh(todo)

    logger.log_db_query("insert", "todos", 1, todo_id=todo.id)
    return todo


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: str,
    update_data: TodoUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update a todo; only fields present in the body change"""
    todo = await get_owned_todo(db, parse_id(todo_id), current_user)

    for field, value in update_data.model_dump(exclude_unset=True).items():
        if value is None and field not in NULLABLE_FIELDS:
            continue
        if field == "priority":
            value = value.value
        setattr(todo, field, value)

    await db.commit()
    await db.refresh(todo)

    logger.log_db_query("update", "todos", 1, todo_id=todo.id)
    return todo


@router.delete("/{todo_id}", response_model=MessageResponse)
async def delete_todo(
    todo_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    todo = await get_owned_todo(db, parse_id(todo_id), current_user)
    await db.delete(todo)
    await db.commit()

    logger.log_db_query("delete", "todos", 1, todo_id=todo.id)
    return MessageResponse(message="Todo가 삭제되었습니다.")
