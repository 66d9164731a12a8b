# Re-export all models for convenient imports
from app.models.user import User, UserRole
from app.models.board import Board, DEFAULT_BOARD_CATEGORY
from app.models.post import Post
from app.models.comment import Comment
from app.models.todo import Todo, TodoPriority
from app.models.guestbook import GuestbookEntry

__all__ = [
    # User
    "User",
    "UserRole",
    # Boards
    "Board",
    "DEFAULT_BOARD_CATEGORY",
    "Post",
    "Comment",
    # Todos
    "Todo",
    "TodoPriority",
    # Guestbook
    "GuestbookEntry",
]
