from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from app.core.database import get_db
from app.models.user import User
from app.modules.auth.dependencies import get_optional_user
from app.schemas.comment import CommentCreate, CommentResponse
from app.services.board_service import board_service

router = APIRouter()


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    comment_data: CommentCreate,
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    """Comment on a post as a member or a guest, subject to the board's guest policy"""
    return await board_service.create_comment(db, comment_data, current_user)
