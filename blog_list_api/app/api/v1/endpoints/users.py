"""
User endpoints for API v1.

Provide registration and listing of users.  Each listed user carries
the blogs they created.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from blog_list_api.app.core.db import Database, get_db
from blog_list_api.app.schemas.user import UserCreate, UserRead
from blog_list_api.app.services.user_service import UserService


router = APIRouter()


def get_user_service(db: Database = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new user.

    ``username`` must be unique and both ``username`` and ``password``
    must be at least three characters long; violations answer 400.
    """
    return service.create_user(user)


@router.get("/", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    return service.list_users()
