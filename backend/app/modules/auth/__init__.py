# Authentication module

from app.modules.auth.dependencies import (
    get_current_user,
    get_current_admin,
    get_optional_user,
    require_role,
    ensure_not_self,
)

from app.modules.auth.session import (
    SessionIdentity,
    resolve_session,
)

from app.modules.auth.authorship import (
    Authorship,
    resolve_authorship,
    ensure_board_writable,
)

__all__ = [
    # User authentication
    "get_current_user",
    "get_current_admin",
    "get_optional_user",
    "require_role",
    "ensure_not_self",
    # Session
    "SessionIdentity",
    "resolve_session",
    # Authorship
    "Authorship",
    "resolve_authorship",
    "ensure_board_writable",
]
