# Pydantic schemas
from app.schemas.common import CamelModel, MessageResponse
from app.schemas.auth import (
    UserRegister,
    UserLogin,
    UserResponse,
    AuthResponse,
)
from app.schemas.board import (
    BoardCreate,
    BoardUpdate,
    BoardResponse,
    AdminBoardResponse,
    BoardSummary,
)
from app.schemas.post import (
    PostCreate,
    PostUpdate,
    PostResponse,
    PostDetailResponse,
)
from app.schemas.comment import CommentCreate, CommentResponse
from app.schemas.todo import TodoCreate, TodoUpdate, TodoResponse
from app.schemas.guestbook import (
    GuestbookCreate,
    GuestbookApprovalUpdate,
    GuestbookResponse,
)
from app.schemas.admin import (
    AdminUserCreate,
    AdminUserUpdate,
    AdminUserResponse,
    AdminStatsResponse,
    ApproveAllResponse,
)
