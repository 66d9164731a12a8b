"""
Board Service - boards, posts and comments

Handles:
- Board CRUD and the admin listing with post counts
- Posts with guest/member authorship and author-or-admin edits
- Atomic view counting on post reads
- Comments, which follow the authorship policy of the post's board
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlalchemy import select, update, func
from typing import Optional, List, Tuple

from app.core.exceptions import BoardNotFoundError, NotPostAuthorError, PostNotFoundError
from app.core.logging_config import logger
from app.models.board import Board
from app.models.comment import Comment
from app.models.post import Post
from app.models.user import User
from app.modules.auth.authorship import ensure_board_writable, resolve_authorship
from app.schemas.board import BoardCreate, BoardUpdate
from app.schemas.comment import CommentCreate
from app.schemas.post import PostCreate, PostUpdate
from app.utils.pagination import PaginationParams


def ensure_can_modify_post(post: Post, actor: User) -> None:
    """Member authors may change their own posts; admins may change any post"""
    if actor.is_admin:
        return
    if not post.is_guest and post.author_id is not None and post.author_id == actor.id:
        return
    raise NotPostAuthorError()


class BoardService:
    """Service for boards and their posts and comments"""

    # ==================== BOARDS ====================

    async def list_active_boards(self, db: AsyncSession, pagination: PaginationParams) -> List[Board]:
        query = (
            select(Board)
            .where(Board.is_active.is_(True))
            .order_by(Board.created_at.desc(), Board.id.desc())
        )
        result = await db.execute(pagination.apply(query))
        return list(result.scalars().all())

    async def list_boards_with_post_counts(
        self,
        db: AsyncSession,
        pagination: PaginationParams
    ) -> List[Tuple[Board, int]]:
        """All boards (active or not) with their post count, newest first"""
        query = (
            select(Board, func.count(Post.id).label("post_count"))
            .outerjoin(Post, Post.board_id == Board.id)
            .group_by(Board.id)
            .order_by(Board.created_at.desc(), Board.id.desc())
        )
        result = await db.execute(pagination.apply(query))
        return [(board, post_count) for board, post_count in result.all()]

    async def get_board(self, db: AsyncSession, board_id: int) -> Board:
        board = await db.get(Board, board_id)
        if not board:
            raise BoardNotFoundError(board_id)
        return board

    async def create_board(self, db: AsyncSession, board_data: BoardCreate) -> Board:
        board = Board(
            title=board_data.title,
            description=board_data.description,
            category=board_data.category_or_default,
            allow_guest=board_data.allow_guest,
        )
        db.add(board)
        await db.commit()
        await db.refresh(board)

        logger.log_db_query("insert", "boards", 1, board_id=board.id)
        return board

    async def update_board(self, db: AsyncSession, board: Board, update_data: BoardUpdate) -> Board:
        changes = update_data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            # description is the only nullable column
            if value is None and field != "description":
                continue
            setattr(board, field, value)

        await db.commit()
        await db.refresh(board)

        logger.log_db_query("update", "boards", 1, board_id=board.id)
        return board

    async def delete_board(self, db: AsyncSession, board: Board) -> None:
        """Delete a board together with its posts and their comments"""
        board_id = board.id
        await db.delete(board)
        await db.commit()
        logger.log_db_query("delete", "boards", 1, board_id=board_id)

    # ==================== POSTS ====================

    async def list_posts(self, db: AsyncSession, board_id: int, pagination: PaginationParams) -> List[Post]:
        await self.get_board(db, board_id)
        query = (
            select(Post)
            .where(Post.board_id == board_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        result = await db.execute(pagination.apply(query))
        return list(result.scalars().all())

    async def get_post(
        self,
        db: AsyncSession,
        post_id: int,
        board_id: Optional[int] = None,
        with_board: bool = False
    ) -> Post:
        query = select(Post).where(Post.id == post_id)
        if board_id is not None:
            query = query.where(Post.board_id == board_id)
        if with_board:
            query = query.options(selectinload(Post.board))
        # Reload even if the row is already in the identity map
        query = query.execution_options(populate_existing=True)

        post = await db.scalar(query)
        if not post:
            raise PostNotFoundError(post_id)
        return post

    async def increment_views(self, db: AsyncSession, post_id: int, board_id: Optional[int] = None) -> None:
        """
        Bump the view counter with a single UPDATE ... SET views = views + 1.

        Failures are logged and rolled back; the read that triggered the
        increment still proceeds.
        """
        stmt = update(Post).where(Post.id == post_id)
        if board_id is not None:
            stmt = stmt.where(Post.board_id == board_id)
        # Keep updated_at untouched: a read is not an edit
        stmt = stmt.values(views=Post.views + 1, updated_at=Post.updated_at)
        stmt = stmt.execution_options(synchronize_session=False)

        try:
            result = await db.execute(stmt)
            await db.commit()
            logger.log_db_query("update", "posts", result.rowcount, post_id=post_id)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.warning(
                f"View count increment failed for post {post_id}: {type(e).__name__}",
                extra={"event_type": "view_increment_failed", "post_id": post_id},
            )

    async def read_post(self, db: AsyncSession, post_id: int, board_id: Optional[int] = None) -> Post:
        """Increment views, then fetch the post with its board"""
        await self.increment_views(db, post_id, board_id)
        return await self.get_post(db, post_id, board_id=board_id, with_board=True)

    async def create_post(
        self,
        db: AsyncSession,
        board: Board,
        post_data: PostCreate,
        actor: Optional[User]
    ) -> Post:
        ensure_board_writable(board)
        authorship = resolve_authorship(board, post_data.is_guest, post_data.author_name, actor)

        post = Post(
            title=post_data.title,
            content=post_data.content,
            board_id=board.id,
            author_id=authorship.author_id,
            author_name=authorship.author_name,
            is_guest=authorship.is_guest,
            views=0,
        )
        db.add(post)
        await db.commit()
        await db.refresh(post)

        logger.log_db_query("insert", "posts", 1, post_id=post.id, board_id=board.id, is_guest=post.is_guest)
        return post

    async def update_post(self, db: AsyncSession, post: Post, update_data: PostUpdate, actor: User) -> Post:
        ensure_can_modify_post(post, actor)

        post.title = update_data.title
        post.content = update_data.content
        await db.commit()
        await db.refresh(post)

        logger.log_db_query("update", "posts", 1, post_id=post.id)
        return post

    async def delete_post(self, db: AsyncSession, post: Post, actor: User) -> None:
        ensure_can_modify_post(post, actor)

        post_id = post.id
        await db.delete(post)
        await db.commit()
        logger.log_db_query("delete", "posts", 1, post_id=post_id)

    # ==================== COMMENTS ====================

    async def list_comments(self, db: AsyncSession, post_id: int, pagination: PaginationParams) -> List[Comment]:
        await self.get_post(db, post_id)
        query = (
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        result = await db.execute(pagination.apply(query))
        return list(result.scalars().all())

    async def create_comment(self, db: AsyncSession, comment_data: CommentCreate, actor: Optional[User]) -> Comment:
        post = await self.get_post(db, comment_data.post_id, with_board=True)
        ensure_board_writable(post.board)
        authorship = resolve_authorship(post.board, comment_data.is_guest, comment_data.author_name, actor)

        comment = Comment(
            post_id=post.id,
            content=comment_data.content,
            author_id=authorship.author_id,
            author_name=authorship.author_name,
            is_guest=authorship.is_guest,
        )
        db.add(comment)
        await db.commit()
        await db.refresh(comment)

        logger.log_db_query("insert", "comments", 1, comment_id=comment.id, post_id=post.id)
        return comment


board_service = BoardService()
