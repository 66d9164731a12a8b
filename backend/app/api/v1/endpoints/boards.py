"""
Board endpoints.

Public reads, admin-only board creation, and the board-scoped post
routes. Writes to posts go through the authorship policy of the board.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.core.database import get_db
from app.models.user import User
from app.modules.auth.dependencies import get_current_admin, get_current_user, get_optional_user
from app.schemas.board import BoardCreate, BoardResponse
from app.schemas.common import MessageResponse
from app.schemas.post import PostCreate, PostUpdate, PostResponse, PostDetailResponse
from app.services.board_service import board_service
from app.utils.pagination import PaginationParams, pagination_params
from app.utils.validators import parse_id

router = APIRouter()


@router.get("", response_model=List[BoardResponse])
async def list_boards(
    pagination: PaginationParams = Depends(pagination_params),
    db: AsyncSession = Depends(get_db)
):
    """List active boards, newest first"""
    return await board_service.list_active_boards(db, pagination)


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
async def create_board(
    board_data: BoardCreate,
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Create a board (admin only)"""
    return await board_service.create_board(db, board_data)


@router.get("/{board_id}", response_model=BoardResponse)
async def get_board(board_id: str, db: AsyncSession = Depends(get_db)):
    return await board_service.get_board(db, parse_id(board_id, "boardId"))


# ==================== Board posts ====================

@router.get("/{board_id}/posts", response_model=List[PostResponse])
async def list_board_posts(
    board_id: str,
    pagination: PaginationParams = Depends(pagination_params),
    db: AsyncSession = Depends(get_db)
):
    """List posts of a board, newest first"""
    return await board_service.list_posts(db, parse_id(board_id, "boardId"), pagination)


@router.post("/{board_id}/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_board_post(
    board_id: str,
    post_data: PostCreate,
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    """
    Create a post as a member or a guest.

    Member posts take the author name from the session user. Guest posts
    need `authorName` (or the older `author` key) and are refused on
    boards that do not allow guests.
    """
    board = await board_service.get_board(db, parse_id(board_id, "boardId"))
    return await board_service.create_post(db, board, post_data, current_user)


@router.get("/{board_id}/posts/{post_id}", response_model=PostDetailResponse)
async def get_board_post(board_id: str, post_id: str, db: AsyncSession = Depends(get_db)):
    """Read a post; each read counts as a view"""
    board = await board_service.get_board(db, parse_id(board_id, "boardId"))
    return await board_service.read_post(db, parse_id(post_id, "postId"), board_id=board.id)


@router.put("/{board_id}/posts/{post_id}", response_model=PostResponse)
async def update_board_post(
    board_id: str,
    post_id: str,
    update_data: PostUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Edit a post (author or admin)"""
    board = await board_service.get_board(db, parse_id(board_id, "boardId"))
    post = await board_service.get_post(db, parse_id(post_id, "postId"), board_id=board.id)
    return await board_service.update_post(db, post, update_data, current_user)


@router.delete("/{board_id}/posts/{post_id}", response_model=MessageResponse)
async def delete_board_post(
    board_id: str,
    post_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a post and its comments (author or admin)"""
    board = await board_service.get_board(db, parse_id(board_id, "boardId"))
    post = await board_service.get_post(db, parse_id(post_id, "postId"), board_id=board.id)
    await board_service.delete_post(db, post, current_user)
    return MessageResponse(message="게시글이 삭제되었습니다.")
