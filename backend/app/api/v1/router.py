from fastapi import APIRouter
from app.api.v1.endpoints import auth, boards, posts, comments, todos, guestbook
from app.api.v1.endpoints.admin import admin_router

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(boards.router, prefix="/boards", tags=["Boards"])
api_router.include_router(posts.router, prefix="/posts", tags=["Posts"])
api_router.include_router(comments.router, prefix="/comments", tags=["Comments"])
api_router.include_router(todos.router, prefix="/todos", tags=["Todos"])
api_router.include_router(guestbook.router, prefix="/guestbook", tags=["Guestbook"])

# Admin dashboard (all routes require the admin role)
api_router.include_router(admin_router)
