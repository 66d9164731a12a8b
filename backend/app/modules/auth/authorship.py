"""
Authorship Resolution
=====================
Decides who a post or comment belongs to.

A write is either a member write (attributed to the signed-in user) or a
guest write (attributed to a free-text name with no user id). The board's
`allow_guest` flag is checked before anything else and cannot be bypassed
by client-supplied flags.
"""

from dataclasses import dataclass
from typing import Optional

from app.core.exceptions import (
    AuthenticationRequiredError,
    BoardInactiveError,
    GuestNotAllowedError,
    MissingAuthorNameError,
)
from app.models.board import Board
from app.models.user import User


@dataclass(frozen=True)
class Authorship:
    """Author fields to store on a post or comment"""
    author_id: Optional[int]
    author_name: str
    is_guest: bool


def ensure_board_writable(board: Board) -> None:
    if not board.is_active:
        raise BoardInactiveError()


def resolve_authorship(
    board: Board,
    is_guest: bool,
    author_name: Optional[str],
    actor: Optional[User],
) -> Authorship:
    """
    Compute stored authorship for a write against `board`.

    Raises:
        GuestNotAllowedError: board is members-only and the write is
            anonymous or flagged as a guest write
        AuthenticationRequiredError: member write without a session
        MissingAuthorNameError: guest write with a blank name
    """
    if not board.allow_guest and (is_guest or actor is None):
        raise GuestNotAllowedError()

    if not is_guest:
        if actor is None:
            raise AuthenticationRequiredError()
        # Member name always comes from the account, never the payload
        return Authorship(author_id=actor.id, author_name=actor.name, is_guest=False)

    name = (author_name or "").strip()
    if not name:
        raise MissingAuthorNameError()

    return Authorship(author_id=None, author_name=name, is_guest=True)
