from app.services.user_service import UserService, user_service
from app.services.board_service import BoardService, board_service, ensure_can_modify_post

__all__ = [
    "UserService",
    "user_service",
    "BoardService",
    "board_service",
    "ensure_can_modify_post",
]
