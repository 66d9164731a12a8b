"""
Unit Tests for Community Schemas
Tests for: camelCase aliases, input normalization, role parsing
"""
import pytest
from datetime import datetime
from pydantic import ValidationError

from app.models.user import UserRole
from app.schemas import (
    AdminUserCreate,
    AdminUserUpdate,
    BoardCreate,
    BoardUpdate,
    CommentCreate,
    GuestbookCreate,
    PostCreate,
    PostResponse,
    TodoUpdate,
    UserRegister,
    UserResponse,
)


class TestUserRegister:
    """Test UserRegister schema"""

    def test_email_is_lowercased(self):
        user = UserRegister(name="홍길동", email="Hong@Example.COM", password="secret1")

        assert user.email == "hong@example.com"

    def test_short_password_fails(self):
        with pytest.raises(ValidationError):
            UserRegister(name="홍길동", email="hong@example.com", password="12345")

    def test_invalid_email_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            UserRegister(name="홍길동", email="not-an-email", password="secret1")

        assert "email" in str(exc_info.value).lower()

    def test_blank_name_fails(self):
        """Whitespace is stripped before the length check"""
        with pytest.raises(ValidationError):
            UserRegister(name="   ", email="hong@example.com", password="secret1")


class TestUserResponse:

    def test_role_is_lowercased(self):
        response = UserResponse(id=1, name="관리자", email="admin@example.com", role="ADMIN")

        assert response.role == "admin"

    def test_password_never_serialized(self):
        dumped = UserResponse(id=1, name="a", email="a@b.com", role="user").model_dump(by_alias=True)

        assert "password" not in dumped
        assert "hashedPassword" not in dumped


class TestBoardSchemas:

    def test_category_defaults(self):
        board = BoardCreate(title="Q&A", description="질문 게시판")

        assert board.category is None
        assert board.category_or_default == "기타"
        assert board.allow_guest is True

    def test_camel_case_input(self):
        board = BoardCreate.model_validate({"title": "Notice", "description": "공지", "allowGuest": False})

        assert board.allow_guest is False

    def test_description_required(self):
        with pytest.raises(ValidationError):
            BoardCreate(title="Notice")

    def test_partial_update_tracks_set_fields(self):
        update = BoardUpdate.model_validate({"isActive": False})

        assert update.model_dump(exclude_unset=True) == {"is_active": False}


class TestPostSchemas:

    def test_author_name_alias(self):
        post = PostCreate.model_validate({"title": "t", "content": "c", "isGuest": True, "authorName": "손님"})

        assert post.author_name == "손님"
        assert post.is_guest is True

    def test_legacy_author_key(self):
        post = PostCreate.model_validate({"title": "t", "content": "c", "isGuest": True, "author": "손님"})

        assert post.author_name == "손님"

    def test_blank_title_fails(self):
        with pytest.raises(ValidationError):
            PostCreate(title="  ", content="c")

    def test_response_echoes_author(self):
        now = datetime.utcnow()
        response = PostResponse(
            id=1, title="t", content="c", board_id=1, author_id=None,
            author_name="손님", is_guest=True, views=0, created_at=now, updated_at=now,
        )

        dumped = response.model_dump(by_alias=True)

        assert dumped["authorName"] == "손님"
        assert dumped["author"] == "손님"
        assert dumped["isGuest"] is True
        assert dumped["boardId"] == 1


class TestCommentCreate:

    def test_post_id_alias(self):
        comment = CommentCreate.model_validate({"postId": 3, "content": "좋아요"})

        assert comment.post_id == 3
        assert comment.is_guest is False

    def test_non_integer_post_id_fails(self):
        with pytest.raises(ValidationError):
            CommentCreate.model_validate({"postId": "abc", "content": "좋아요"})


class TestGuestbookCreate:

    def test_blank_email_becomes_none(self):
        entry = GuestbookCreate(name="방문자", email="", message="안녕하세요")

        assert entry.email is None

    def test_invalid_email_fails(self):
        with pytest.raises(ValidationError):
            GuestbookCreate(name="방문자", email="nope", message="안녕하세요")


class TestTodoUpdate:

    def test_invalid_priority_fails(self):
        with pytest.raises(ValidationError):
            TodoUpdate(priority="urgent")

    def test_completed_only(self):
        update = TodoUpdate.model_validate({"completed": True})

        assert update.model_dump(exclude_unset=True) == {"completed": True}


class TestAdminUserSchemas:

    def test_role_parsed_case_insensitively(self):
        user = AdminUserCreate(name="a", email="A@B.com", password="secret1", role="ADMIN")

        assert user.role == UserRole.ADMIN
        assert user.email == "a@b.com"

    def test_default_role_is_user(self):
        user = AdminUserCreate(name="a", email="a@b.com", password="secret1")

        assert user.role == UserRole.USER
        assert user.is_active is True

    def test_unknown_role_fails(self):
        with pytest.raises(ValidationError):
            AdminUserUpdate(role="superuser")
