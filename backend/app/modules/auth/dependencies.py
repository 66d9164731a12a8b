from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional, Union

from app.core.database import get_db
from app.core.exceptions import (
    AuthenticationRequiredError,
    InsufficientRoleError,
    SelfDeletionForbiddenError,
)
from app.core.logging_config import set_user_id
from app.models.user import User, UserRole
from app.modules.auth.session import resolve_session


async def get_optional_user(
    request: Request,
    db: AsyncSession = Depends(get_db)
) -> Optional[User]:
    """Get current user if the request carries a valid session, else None"""
    identity = resolve_session(request)
    if identity is None:
        return None

    # Always reload: the token's role and active flag may be stale
    user = await db.get(User, identity.id)
    if user is None or not user.is_active:
        return None

    set_user_id(user.id)
    request.state.user_id = user.id
    return user


async def get_current_user(
    user: Optional[User] = Depends(get_optional_user)
) -> User:
    """Get current authenticated user"""
    if user is None:
        raise AuthenticationRequiredError()
    return user


def require_role(role: Union[UserRole, str]):
    """
    Dependency factory requiring the live user row to hold `role`.

    Roles compare case-insensitively, so legacy rows stored as "ADMIN"
    still pass an admin check.

    Usage:
        @router.get("/reports", dependencies=[Depends(require_role(UserRole.ADMIN))])
    """
    required = UserRole.parse(role)
    if required is None:
        raise ValueError(f"Unknown role: {role}")

    async def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role_enum != required:
            raise InsufficientRoleError(required.value)
        return current_user

    return role_checker


get_current_admin = require_role(UserRole.ADMIN)


def ensure_not_self(actor: User, target_id: int) -> None:
    """Guard against an admin deleting their own account"""
    if actor.id == target_id:
        raise SelfDeletionForbiddenError()
