"""
Unit Tests for the exception hierarchy
"""
from app.core.exceptions import (
    CommunityError,
    ValidationError,
    InvalidIdError,
    DuplicateEmailError,
    SelfDeletionForbiddenError,
    AuthenticationRequiredError,
    InsufficientRoleError,
    GuestNotAllowedError,
    PostNotFoundError,
    TodoNotFoundError,
    error_response,
)


class TestErrorStatus:
    """Each error family maps to one HTTP status"""

    def test_validation_family_is_400(self):
        for error in (ValidationError("bad"), InvalidIdError(), DuplicateEmailError("a@b.com"), SelfDeletionForbiddenError()):
            assert error.status_code == 400

    def test_authentication_is_401(self):
        assert AuthenticationRequiredError().status_code == 401

    def test_authorization_is_403(self):
        assert InsufficientRoleError().status_code == 403
        assert GuestNotAllowedError().status_code == 403

    def test_not_found_is_404(self):
        error = PostNotFoundError(3)

        assert error.status_code == 404
        assert error.code == "POST_NOT_FOUND"
        assert error.message == "게시글을 찾을 수 없습니다."

    def test_base_error_defaults_to_500(self):
        assert CommunityError("boom").status_code == 500


class TestErrorResponse:

    def test_body_has_error_and_code(self):
        body = error_response(DuplicateEmailError("a@b.com"))

        assert body == {"error": "이미 존재하는 이메일입니다.", "code": "DUPLICATE_EMAIL"}

    def test_subclass_codes_override_parent(self):
        assert InvalidIdError().code == "INVALID_ID"
        assert TodoNotFoundError(1).code == "TODO_NOT_FOUND"
