"""
Pydantic models for blog data.

``BlogBase`` holds the shared fields; ``BlogCreate`` is the request
body for new posts and ``BlogUpdate`` the partial body for edits.
``BlogRead`` is the stored record with its owner id, while
``BlogWithOwner`` is the listing representation where the owner is
projected to ``{id, username, name}``.
"""

from typing import Optional

from pydantic import BaseModel, Field


# Largest value an SQLite INTEGER column can hold.
MAX_LIKES = 2**63 - 1


class BlogBase(BaseModel):
    title: str = Field(..., min_length=1, example="React patterns")
    author: Optional[str] = Field(None, example="Michael Chan")
    url: str = Field(..., min_length=1, example="https://reactpatterns.com/")
    likes: int = Field(0, ge=0, le=MAX_LIKES, example=7)


class BlogCreate(BlogBase):
    """Schema for creating a blog.

    The owner is never taken from the body; it is always the
    authenticated caller.  Unknown fields such as ``user`` are ignored.
    A missing or null ``likes`` defaults to 0.
    """

    likes: Optional[int] = Field(0, ge=0, le=MAX_LIKES, example=7)


class BlogUpdate(BaseModel):
    """Schema for updating a blog.

    All fields are optional; only provided fields will be updated.
    """

    title: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = None
    url: Optional[str] = Field(None, min_length=1)
    likes: Optional[int] = Field(None, ge=0, le=MAX_LIKES)


class BlogRead(BlogBase):
    """A stored blog; ``user`` is the id of the owning account."""

    id: int
    user: int


class BlogOwner(BaseModel):
    id: int
    username: str
    name: Optional[str] = None


class BlogWithOwner(BlogBase):
    """Listing representation of a blog with its owner projected."""

    id: int
    user: Optional[BlogOwner] = None


class BlogSummary(BlogBase):
    """Blog projection embedded in user listings."""

    id: int
