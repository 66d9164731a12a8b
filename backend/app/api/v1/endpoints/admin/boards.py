"""
Admin Board Management endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.database import get_db
from app.models import User
from app.modules.auth.dependencies import get_current_admin
from app.schemas.board import AdminBoardResponse, BoardCreate, BoardResponse, BoardUpdate
from app.schemas.common import MessageResponse
from app.services.board_service import board_service
from app.utils.pagination import PaginationParams, pagination_params
from app.utils.validators import parse_id

router = APIRouter()


@router.get("", response_model=List[AdminBoardResponse])
async def list_boards(
    pagination: PaginationParams = Depends(pagination_params),
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """List every board, including inactive ones, with its post count"""
    rows = await board_service.list_boards_with_post_counts(db, pagination)
    return [
        AdminBoardResponse.model_validate(board).model_copy(update={"post_count": post_count})
        for board, post_count in rows
    ]


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
async def create_board(
    board_data: BoardCreate,
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    return await board_service.create_board(db, board_data)


@router.put("/{board_id}", response_model=BoardResponse)
async def update_board(
    board_id: str,
    update_data: BoardUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    board = await board_service.get_board(db, parse_id(board_id))
    return await board_service.update_board(db, board, update_data)


@router.delete("/{board_id}", response_model=MessageResponse)
async def delete_board(
    board_id: str,
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Delete a board with all of its posts and comments"""
    board = await board_service.get_board(db, parse_id(board_id))
    await board_service.delete_board(db, board)
    return MessageResponse(message="게시판이 삭제되었습니다.")
