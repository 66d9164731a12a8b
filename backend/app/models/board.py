from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text
from sqlalchemy.orm import relationship
from datetime import datetime

from app.core.database import Base


DEFAULT_BOARD_CATEGORY = "기타"


class Board(Base):
    """Discussion board"""
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(100), default=DEFAULT_BOARD_CATEGORY, nullable=False)

    # Anonymous posting/commenting policy
    allow_guest = Column(Boolean, default=True, nullable=False)
    # Inactive boards are hidden from the public list and closed for writing
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    posts = relationship("Post", back_populates="board", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Board {self.id} {self.title}>"
