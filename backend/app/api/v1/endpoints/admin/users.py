"""
Admin User Management endpoints.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.database import get_db
from app.core.logging_config import logger
from app.models import User
from app.modules.auth.dependencies import get_current_admin
from app.schemas.admin import AdminUserCreate, AdminUserUpdate, AdminUserResponse
from app.schemas.common import MessageResponse
from app.services.user_service import user_service
from app.utils.pagination import PaginationParams, pagination_params
from app.utils.validators import parse_id

router = APIRouter()


def log_admin_action(request: Request, admin: User, action: str, target_id: int) -> None:
    """Record an admin action in the application log"""
    logger.info(
        f"[Admin] {admin.email} {action} user {target_id}",
        extra={
            "event_type": "admin_action",
            "admin_id": admin.id,
            "action": action,
            "target_type": "user",
            "target_id": target_id,
            "client_ip": request.client.host if request.client else None,
        }
    )


@router.get("", response_model=List[AdminUserResponse])
async def list_users(
    pagination: PaginationParams = Depends(pagination_params),
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """List all users, newest first"""
    return await user_service.list_users(db, pagination)


@router.post("", response_model=AdminUserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    user_data: AdminUserCreate,
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Create a user with an explicit role and status"""
    user = await user_service.create_user(
        db,
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        role=user_data.role,
        is_active=user_data.is_active,
    )
    log_admin_action(request, current_admin, "created", user.id)
    return user


@router.put("/{user_id}", response_model=AdminUserResponse)
async def update_user(
    request: Request,
    user_id: str,
    update_data: AdminUserUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Update name, email, role or active status"""
    user = await user_service.get_user(db, parse_id(user_id))
    user = await user_service.update_user(db, user, update_data)
    log_admin_action(request, current_admin, "updated", user.id)
    return user


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    request: Request,
    user_id: str,
    db: AsyncSession = Depends(get_db),
    current_admin: User = Depends(get_current_admin)
):
    """Delete a user; admins cannot delete themselves"""
    target_id = parse_id(user_id)
    await user_service.delete_user(db, current_admin, target_id)
    log_admin_action(request, current_admin, "deleted", target_id)
    return MessageResponse(message="사용자가 삭제되었습니다.")
