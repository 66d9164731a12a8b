from fastapi import APIRouter, Depends, status, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.exceptions import DuplicateEmailError, InvalidCredentialsError
from app.core.security import create_access_token
from app.core.logging_config import logger, set_user_id
from app.core.rate_limiter import login_rate_limit, register_rate_limit
from app.models.user import User
from app.schemas.auth import UserRegister, UserLogin, UserResponse, AuthResponse
from app.schemas.common import MessageResponse
from app.modules.auth.dependencies import get_current_user
from app.modules.auth.session import set_session_cookie, clear_session_cookie
from app.services.user_service import user_service


router = APIRouter()


def issue_session(response: Response, user: User) -> None:
    token = create_access_token({"id": user.id, "email": user.email, "role": user.role})
    set_session_cookie(response, token)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@register_rate_limit()
async def register(
    request: Request,
    response: Response,
    user_data: UserRegister,
    db: AsyncSession = Depends(get_db)
):
    """Register new user and start a session"""
    client_ip = request.client.host if request.client else "unknown"

    try:
        user = await user_service.create_user(
            db,
            name=user_data.name,
            email=user_data.email,
            password=user_data.password,
        )
    except DuplicateEmailError:
        logger.log_auth_event(
            event="register",
            success=False,
            user_email=user_data.email,
            reason="Email already registered",
            client_ip=client_ip
        )
        raise

    logger.log_auth_event(
        event="register",
        success=True,
        user_email=user.email,
        client_ip=client_ip,
    )

    issue_session(response, user)
    return AuthResponse(
        message="회원가입이 완료되었습니다.",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
@login_rate_limit()
async def login(
    request: Request,
    response: Response,
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """Login with email and password"""
    client_ip = request.client.host if request.client else "unknown"

    user = await user_service.authenticate(db, credentials.email, credentials.password)
    if not user:
        logger.log_auth_event(
            event="login",
            success=False,
            user_email=credentials.email,
            reason="Invalid credentials or inactive account",
            client_ip=client_ip
        )
        raise InvalidCredentialsError()

    set_user_id(user.id)
    logger.log_auth_event(
        event="login",
        success=True,
        user_email=user.email,
        client_ip=client_ip,
    )

    issue_session(response, user)
    return AuthResponse(
        message="로그인이 완료되었습니다.",
        user=UserResponse.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """End the session by clearing the cookie"""
    clear_session_cookie(response)
    return MessageResponse(message="로그아웃되었습니다.")


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get current user info"""
    return current_user
