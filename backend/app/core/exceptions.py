"""
Custom Exceptions for Community Hub
===================================

Every error a handler can report to the client is one of these. The
exception handlers in app.main turn them into `{"error": ..., "code": ...}`
bodies with the matching HTTP status.

Usage:
    from app.core.exceptions import BoardNotFoundError, GuestNotAllowedError

    if not board:
        raise BoardNotFoundError(board_id)

    if not board.allow_guest:
        raise GuestNotAllowedError()
"""

from typing import Optional, Any, Dict


class CommunityError(Exception):
    """Base exception for all Community Hub errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "code": self.code,
        }


class InternalError(CommunityError):
    """Unexpected datastore or server failure"""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR", status_code=500)


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(CommunityError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class InvalidIdError(ValidationError):
    """Path or query identifier is not a valid integer"""

    def __init__(self, field: str = "id"):
        super().__init__("유효하지 않은 ID입니다.", field=field)
        self.code = "INVALID_ID"


class MissingAuthorNameError(ValidationError):
    """Guest write without a display name"""

    def __init__(self):
        super().__init__("이름을 입력해주세요.", field="authorName")
        self.code = "MISSING_AUTHOR_NAME"


class DuplicateEmailError(ValidationError):
    """Email already belongs to another account"""

    def __init__(self, email: str = ""):
        super().__init__("이미 존재하는 이메일입니다.", field="email")
        self.code = "DUPLICATE_EMAIL"
        if email:
            self.details["email"] = email


class SelfDeletionForbiddenError(ValidationError):
    """Admin tried to delete their own account"""

    def __init__(self):
        super().__init__("자기 자신은 삭제할 수 없습니다.")
        self.code = "SELF_DELETION_FORBIDDEN"


# ============================================
# Authentication Errors (401-type)
# ============================================

class AuthenticationError(CommunityError):
    """User authentication failed"""

    status_code = 401

    def __init__(self, message: str = "Authentication failed", code: str = "AUTH_FAILED"):
        super().__init__(message, code=code)


class AuthenticationRequiredError(AuthenticationError):
    """No valid session on a request that needs one"""

    def __init__(self, message: str = "인증이 필요합니다."):
        super().__init__(message, code="AUTHENTICATION_REQUIRED")


class InvalidCredentialsError(AuthenticationError):
    """Login failed; the message never says which field was wrong"""

    def __init__(self):
        super().__init__("이메일 또는 비밀번호가 잘못되었습니다.", code="INVALID_CREDENTIALS")


class TokenExpiredError(AuthenticationError):
    """JWT token has expired"""

    def __init__(self):
        super().__init__("Token has expired", code="TOKEN_EXPIRED")


class InvalidTokenError(AuthenticationError):
    """JWT token is invalid"""

    def __init__(self):
        super().__init__("Invalid token", code="INVALID_TOKEN")


# ============================================
# Authorization Errors (403-type)
# ============================================

class AuthorizationError(CommunityError):
    """User not authorized for this action"""

    status_code = 403

    def __init__(self, message: str = "Not authorized", code: str = "NOT_AUTHORIZED"):
        super().__init__(message, code=code)


class InsufficientRoleError(AuthorizationError):
    """Authenticated, but the role does not allow this"""

    def __init__(self, required_role: str = "admin"):
        message = "관리자 권한이 필요합니다." if required_role == "admin" else "권한이 없습니다."
        super().__init__(message, code="INSUFFICIENT_ROLE")
        self.details["required_role"] = required_role


class GuestNotAllowedError(AuthorizationError):
    """Board does not accept anonymous writes"""

    def __init__(self):
        super().__init__("로그인한 사용자만 작성할 수 있습니다.", code="GUEST_NOT_ALLOWED")


class BoardInactiveError(AuthorizationError):
    """Board is closed for writing"""

    def __init__(self):
        super().__init__("비활성화된 게시판입니다.", code="BOARD_INACTIVE")


class NotPostAuthorError(AuthorizationError):
    """Only the author or an admin may change a post"""

    def __init__(self):
        super().__init__("작성자만 수정하거나 삭제할 수 있습니다.", code="NOT_POST_AUTHOR")


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(CommunityError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: Any, message: Optional[str] = None):
        super().__init__(
            message or f"{resource_type} with ID '{resource_id}' not found",
            code=f"{resource_type.upper()}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": str(resource_id)}
        )


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id: Any):
        super().__init__("User", user_id, "사용자를 찾을 수 없습니다.")


class BoardNotFoundError(ResourceNotFoundError):
    def __init__(self, board_id: Any):
        super().__init__("Board", board_id, "게시판을 찾을 수 없습니다.")


class PostNotFoundError(ResourceNotFoundError):
    def __init__(self, post_id: Any):
        super().__init__("Post", post_id, "게시글을 찾을 수 없습니다.")


class CommentNotFoundError(ResourceNotFoundError):
    def __init__(self, comment_id: Any):
        super().__init__("Comment", comment_id, "댓글을 찾을 수 없습니다.")


class TodoNotFoundError(ResourceNotFoundError):
    def __init__(self, todo_id: Any):
        super().__init__("Todo", todo_id, "Todo를 찾을 수 없습니다.")


class GuestbookEntryNotFoundError(ResourceNotFoundError):
    def __init__(self, entry_id: Any):
        super().__init__("Guestbook", entry_id, "방명록을 찾을 수 없습니다.")


# ============================================
# Helper function for API responses
# ============================================

def error_response(error: CommunityError) -> Dict[str, Any]:
    """Convert exception to API error response body"""
    return error.to_dict()
