"""
Pydantic models for blog statistics.
"""

from typing import Optional

from pydantic import BaseModel

from .blog import BlogRead


class AuthorBlogCount(BaseModel):
    author: Optional[str] = None
    blogs: int


class AuthorLikes(BaseModel):
    author: Optional[str] = None
    likes: int


class StatisticsRead(BaseModel):
    """All aggregates computed over the current set of blogs."""

    total_likes: int
    favorite_blog: Optional[BlogRead] = None
    most_blogs: Optional[AuthorBlogCount] = None
    most_likes: Optional[AuthorLikes] = None
