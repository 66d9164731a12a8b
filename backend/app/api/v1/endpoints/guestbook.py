from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from app.core.config import settings
from app.core.database import get_db
from app.core.logging_config import logger
from app.models.guestbook import GuestbookEntry
from app.schemas.guestbook import GuestbookCreate, GuestbookResponse
from app.utils.pagination import PaginationParams, pagination_params

router = APIRouter()


@router.get("", response_model=List[GuestbookResponse])
async def list_guestbook(
    pagination: PaginationParams = Depends(pagination_params),
    db: AsyncSession = Depends(get_db)
):
    """List approved entries, newest first"""
    query = (
        select(GuestbookEntry)
        .where(GuestbookEntry.is_approved.is_(True))
        .order_by(GuestbookEntry.created_at.desc(), GuestbookEntry.id.desc())
    )
    result = await db.execute(pagination.apply(query))
    return result.scalars().all()


@router.post("", response_model=GuestbookResponse, status_code=status.HTTP_201_CREATED)
async def create_guestbook_entry(
    entry_data: GuestbookCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Leave a guestbook message.

    New entries are published immediately when AUTO_APPROVE_GUESTBOOK is
    set, otherwise they wait for an admin to approve them.
    """
    entry = GuestbookEntry(
        name=entry_data.name,
        email=entry_data.email,
        message=entry_data.message,
        is_approved=settings.AUTO_APPROVE_GUESTBOOK,
    )
    db.add(entry)
    await db.commit()
    await db.refresh(entry)

    logger.log_db_query("insert", "guestbook", 1, entry_id=entry.id, is_approved=entry.is_approved)
    return entry
