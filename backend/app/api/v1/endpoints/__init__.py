# API endpoints
from . import auth, boards, posts, comments, todos, guestbook

__all__ = ["auth", "boards", "posts", "comments", "todos", "guestbook"]
