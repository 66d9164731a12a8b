"""
User Service - account creation, lookup and admin management

Shared by registration, the admin user endpoints and the bootstrap
script so that email uniqueness is enforced the same way everywhere.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from typing import Optional, List, Union

from app.core.exceptions import DuplicateEmailError, UserNotFoundError
from app.core.logging_config import logger
from app.core.security import get_password_hash, verify_password
from app.models.user import User, UserRole
from app.modules.auth.dependencies import ensure_not_self
from app.schemas.admin import AdminUserUpdate
from app.utils.pagination import PaginationParams


class UserService:
    """Service for managing user accounts"""

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        return await db.scalar(select(User).where(User.email == email.strip().lower()))

    async def get_user(self, db: AsyncSession, user_id: int) -> User:
        user = await db.get(User, user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return user

    async def list_users(self, db: AsyncSession, pagination: PaginationParams) -> List[User]:
        query = select(User).order_by(User.created_at.desc(), User.id.desc())
        result = await db.execute(pagination.apply(query))
        return list(result.scalars().all())

    async def create_user(
        self,
        db: AsyncSession,
        name: str,
        email: str,
        password: str,
        role: Union[UserRole, str] = UserRole.USER,
        is_active: bool = True,
    ) -> User:
        """
        Create an account.

        Raises:
            DuplicateEmailError: email already registered, including the
                case where a concurrent insert wins the unique index
        """
        email = email.strip().lower()
        if await self.get_by_email(db, email):
            raise DuplicateEmailError(email)

        role_value = (UserRole.parse(role) or UserRole.USER).value
        user = User(
            name=name,
            email=email,
            hashed_password=get_password_hash(password),
            role=role_value,
            is_active=is_active,
        )
        db.add(user)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise DuplicateEmailError(email)
        await db.refresh(user)

        logger.log_db_query("insert", "users", 1, user_id=user.id)
        return user

    async def authenticate(self, db: AsyncSession, email: str, password: str) -> Optional[User]:
        """Return the user for valid credentials; inactive accounts never authenticate"""
        user = await self.get_by_email(db, email)
        if not user or not verify_password(password, user.hashed_password):
            return None
        if not user.is_active:
            return None
        return user

    async def update_user(self, db: AsyncSession, user: User, update_data: AdminUserUpdate) -> User:
        changes = update_data.model_dump(exclude_unset=True)

        if changes.get("email") and changes["email"] != user.email:
            existing = await self.get_by_email(db, changes["email"])
            if existing and existing.id != user.id:
                raise DuplicateEmailError(changes["email"])

        for field in ("name", "email", "is_active"):
            if changes.get(field) is not None:
                setattr(user, field, changes[field])
        if changes.get("role") is not None:
            user.role = UserRole.parse(changes["role"]).value

        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise DuplicateEmailError(changes.get("email", ""))
        await db.refresh(user)

        logger.log_db_query("update", "users", 1, user_id=user.id, fields=sorted(changes))
        return user

    async def delete_user(self, db: AsyncSession, actor: User, user_id: int) -> None:
        """Delete an account; posts and comments keep their author name"""
        ensure_not_self(actor, user_id)
        user = await self.get_user(db, user_id)
        await db.delete(user)
        await db.commit()
        logger.log_db_query("delete", "users", 1, user_id=user_id)


user_service = UserService()
