"""
Admin Guestbook moderation endpoints.

Entries are either pending or approved; admins can move an entry either
way, approve everything pending at once, or delete it.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from typing import List

from app.core.database import get_db
from app.core.exceptions import GuestbookEntryNotFoundError
from app.core.logging_config import logger
from app.models import GuestbookEntry, User
from app.modules.auth.dependencies import get_current_admin
from app.schemas.admin import ApproveAllResponse
from app.schemas.common import MessageResponse
from app.schemas.guestbook import GuestbookApprovalUpdate, GuestbookResponse
from app.utils.pagination import PaginationParams, pagination_params
from app.utils.validators import parse_id

router = APIRouter()


async def get_entry(db: AsyncSession, entry_id: int) -> GuestbookEntry:
    entry = await db.get(GuestbookEntry, entry_id)
    if not entry:
        raise GuestbookEntryNotFoundError(entry_id)
    return entry


@router.get("", response_model=List[GuestbookResponse])
async def list_entries(
    pagination: PaginationParams = Depends(pagination_params),
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """List all entries, pending and approved, newest first"""
    query = select(GuestbookEntry).order_by(GuestbookEntry.created_at.desc(), GuestbookEntry.id.desc())
    result = await db.execute(pagination.apply(query))
    return result.scalars().all()


@router.post("/approve-all", response_model=ApproveAllResponse)
async def approve_all(
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Approve every pending entry"""
    result = await db.execute(
        update(GuestbookEntry)
        .where(GuestbookEntry.is_approved.is_(False))
        .values(is_approved=True)
    )
    await db.commit()

    logger.log_db_query("update", "guestbook", result.rowcount, admin_id=current_admin.id)
    return ApproveAllResponse(message="모든 방명록이 승인되었습니다.", approved=result.rowcount)


@router.put("/{entry_id}", response_model=GuestbookResponse)
async def set_approval(
    entry_id: str,
    approval: GuestbookApprovalUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Approve or revoke an entry"""
    entry = await get_entry(db, parse_id(entry_id))
    entry.is_approved = approval.is_approved
    await db.commit()
    await db.refresh(entry)

    logger.log_db_query("update", "guestbook", 1, entry_id=entry.id, is_approved=entry.is_approved)
    return entry


@router.delete("/{entry_id}", response_model=MessageResponse)
async def delete_entry(
    entry_id: str,
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    entry = await get_entry(db, parse_id(entry_id))
    await db.delete(entry)
    await db.commit()

    logger.log_db_query("delete", "guestbook", 1, entry_id=entry.id)
    return MessageResponse(message="방명록이 삭제되었습니다.")
