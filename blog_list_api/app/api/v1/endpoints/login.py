"""
Login endpoint for API v1.

Exchanges a username and password for a bearer token that the blog
endpoints accept in the ``Authorization`` header.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from blog_list_api.app.core.db import Database, get_db
from blog_list_api.app.core.security import TokenCodec, get_token_codec
from blog_list_api.app.schemas.user import LoginRequest, LoginResponse
from blog_list_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: Database = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
) -> LoginResponse:
    """Authenticate a user and return a token.

    Answers 401 if the username is unknown or the password is wrong.
    """
    user = UserService(db).authenticate(credentials.username, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid username or password",
        )
    token = codec.encode({"username": user.username, "id": user.id})
    return LoginResponse(token=token, username=user.username, name=user.name)
