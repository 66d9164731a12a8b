"""
Admin Dashboard endpoints - KPIs.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.core.database import get_db
from app.models import User, UserRole, Post, GuestbookEntry, Todo
from app.modules.auth.dependencies import get_current_admin
from app.schemas.admin import (
    AdminStatsResponse,
    GuestbookStats,
    PostStats,
    RecentPost,
    RecentUser,
    TodoStats,
    UserStats,
)
from app.schemas.guestbook import GuestbookResponse

router = APIRouter()

RECENT_LIMIT = 5


@router.get("/stats", response_model=AdminStatsResponse)
async def get_dashboard_stats(
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Get dashboard KPI statistics"""

    # User stats
    total_users = await db.scalar(select(func.count(User.id)))
    active_users = await db.scalar(select(func.count(User.id)).where(User.is_active.is_(True)))
    admin_users = await db.scalar(
        select(func.count(User.id)).where(func.lower(User.role) == UserRole.ADMIN.value)
    )
    recent_users = await db.scalars(
        select(User).order_by(User.created_at.desc(), User.id.desc()).limit(RECENT_LIMIT)
    )

    # Post stats
    total_posts = await db.scalar(select(func.count(Post.id)))
    recent_posts = await db.scalars(
        select(Post).order_by(Post.created_at.desc(), Post.id.desc()).limit(RECENT_LIMIT)
    )

    # Guestbook stats
    total_guestbook = await db.scalar(select(func.count(GuestbookEntry.id)))
    pending_guestbook = await db.scalar(
        select(func.count(GuestbookEntry.id)).where(GuestbookEntry.is_approved.is_(False))
    )
    recent_guestbook = await db.scalars(
        select(GuestbookEntry)
        .order_by(GuestbookEntry.created_at.desc(), GuestbookEntry.id.desc())
        .limit(RECENT_LIMIT)
    )

    # Todo stats
    total_todos = await db.scalar(select(func.count(Todo.id)))
    completed_todos = await db.scalar(select(func.count(Todo.id)).where(Todo.completed.is_(True)))

    return AdminStatsResponse(
        users=UserStats(
            total=total_users or 0,
            active=active_users or 0,
            admins=admin_users or 0,
            recent=[RecentUser.model_validate(u) for u in recent_users],
        ),
        posts=PostStats(
            total=total_posts or 0,
            recent=[RecentPost.model_validate(p) for p in recent_posts],
        ),
        guestbook=GuestbookStats(
            total=total_guestbook or 0,
            pending=pending_guestbook or 0,
            recent=[GuestbookResponse.model_validate(g) for g in recent_guestbook],
        ),
        todos=TodoStats(
            total=total_todos or 0,
            completed=completed_todos or 0,
        ),
    )
