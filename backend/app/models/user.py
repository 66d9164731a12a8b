from sqlalchemy import Column, String, Boolean, DateTime, Integer
from sqlalchemy.orm import relationship
from datetime import datetime
from typing import Optional, Union
import enum

from app.core.database import Base


class UserRole(str, enum.Enum):
    """User roles"""
    USER = "user"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: Union["UserRole", str, None]) -> Optional["UserRole"]:
        """Case-insensitive lookup; None for unknown values"""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class User(Base):
    """User model"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column("password", String(255), nullable=False)

    # Stored as plain text; older rows may carry upper-case values
    role = Column(String(20), default=UserRole.USER.value, nullable=False)
    avatar = Column(String(500), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Posts and comments keep their denormalized author name when the
    # user is removed; only the back-reference is cleared.
    posts = relationship("Post", back_populates="author_user")
    comments = relationship("Comment", back_populates="author_user")
    todos = relationship("Todo", back_populates="user", cascade="all, delete-orphan")

    @property
    def role_enum(self) -> Optional[UserRole]:
        return UserRole.parse(self.role)

    @property
    def is_admin(self) -> bool:
        return self.role_enum == UserRole.ADMIN

    def __repr__(self):
        return f"<User {self.email}>"
