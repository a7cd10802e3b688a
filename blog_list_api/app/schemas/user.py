"""
Pydantic models for user data.

Defines schemas for creating users, logging in and reading user
information.  The password hash only ever lives on ``UserInDB`` and is
never part of an API response.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .blog import BlogSummary


class UserBase(BaseModel):
    username: str = Field(..., example="mluukkai")
    name: Optional[str] = Field(None, example="Matti Luukkainen")


class UserCreate(UserBase):
    """Schema for registering a user.

    Length rules for ``username`` and ``password`` are enforced by
    ``UserService.create_user`` so that the error messages stay stable.
    """

    password: str = Field(..., example="salainen")


class UserRead(UserBase):
    """Schema for reading a user from the API, with their blogs."""

    id: int
    blogs: List[BlogSummary] = Field(default_factory=list)


class UserInDB(UserBase):
    """Internal representation of a stored account."""

    id: int
    password_hash: str


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    username: str
    name: Optional[str] = None
