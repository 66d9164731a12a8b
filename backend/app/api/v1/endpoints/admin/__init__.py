"""
Admin API endpoints for the Community Hub admin dashboard.
All endpoints require the admin role.
"""
from fastapi import APIRouter

from app.api.v1.endpoints.admin import dashboard, users, boards, guestbook

admin_router = APIRouter(prefix="/admin", tags=["Admin"])

# Include all admin sub-routers
admin_router.include_router(dashboard.router, tags=["Admin Dashboard"])
admin_router.include_router(users.router, prefix="/users", tags=["Admin Users"])
admin_router.include_router(boards.router, prefix="/boards", tags=["Admin Boards"])
admin_router.include_router(guestbook.router, prefix="/guestbook", tags=["Admin Guestbook"])
