from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text
from datetime import datetime

from app.core.database import Base


class GuestbookEntry(Base):
    """
    Public guestbook message.

    Entries move between two states: pending (is_approved=False) and
    approved. Only approved entries appear in the public listing.
    """
    __tablename__ = "guestbook"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    message = Column(Text, nullable=False)
    is_approved = Column(Boolean, default=False, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<GuestbookEntry {self.id} approved={self.is_approved}>"
