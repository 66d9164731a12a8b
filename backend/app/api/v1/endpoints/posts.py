from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.database import get_db
from app.schemas.comment import CommentResponse
from app.schemas.post import PostDetailResponse
from app.services.board_service import board_service
from app.utils.pagination import PaginationParams, pagination_params
from app.utils.validators import parse_id

router = APIRouter()


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(post_id: str, db: AsyncSession = Depends(get_db)):
    """Read a post with its board; each read counts as a view"""
    return await board_service.read_post(db, parse_id(post_id, "postId"))


@router.get("/{post_id}/comments", response_model=List[CommentResponse])
async def list_post_comments(
    post_id: str,
    pagination: PaginationParams = Depends(pagination_params),
    db: AsyncSession = Depends(get_db)
):
    """List comments of a post, newest first"""
    return await board_service.list_comments(db, parse_id(post_id, "postId"), pagination)
