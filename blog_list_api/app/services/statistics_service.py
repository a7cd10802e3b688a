"""
Service layer for blog statistics.

The module level functions are pure aggregations over a sequence of
blog records.  They only read the ``likes`` and ``author`` attributes,
never mutate their input and return the same result for the same
input.  ``StatisticsService`` loads the current blogs from the
database and runs all of them at once.

Tie‑breaks follow input order: the first record (or first author
group, by first appearance) wins among equals.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..core.db import Database
from ..schemas.statistics import AuthorBlogCount, AuthorLikes, StatisticsRead
from .blog_service import BlogService


def total_likes(blogs: Sequence[Any]) -> int:
    """Sum of ``likes`` over ``blogs``; 0 for an empty sequence."""
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Sequence[Any]) -> Optional[Any]:
    """Return the blog with the most likes.

    Only a blog with more than 0 likes can be the favorite, so an empty
    input or one where every blog has 0 likes gives ``None``.
    """
    most = 0
    favorite = None
    for blog in blogs:
        if blog.likes > most:
            favorite = blog
            most = blog.likes
    return favorite


def _group_by_author(blogs: Sequence[Any]) -> Dict[Optional[str], List[Any]]:
    # dicts keep insertion order, i.e. first appearance of each author
    groups: Dict[Optional[str], List[Any]] = {}
    for blog in blogs:
        groups.setdefault(blog.author, []).append(blog)
    return groups


def most_blogs(blogs: Sequence[Any]) -> Optional[AuthorBlogCount]:
    """Return the author with the most blogs and their count.

    Blogs without an author are counted under ``author=None``.
    """
    groups = _group_by_author(blogs)
    if not groups:
        return None
    best: Optional[AuthorBlogCount] = None
    for author, group in groups.items():
        if best is None or len(group) > best.blogs:
            best = AuthorBlogCount(author=author, blogs=len(group))
    return best


def most_likes(blogs: Sequence[Any]) -> Optional[AuthorLikes]:
    """Return the author whose blogs have the most likes in total."""
    groups = _group_by_author(blogs)
    if not groups:
        return None
    best: Optional[AuthorLikes] = None
    for author, group in groups.items():
        likes = total_likes(group)
        if best is None or likes > best.likes:
            best = AuthorLikes(author=author, likes=likes)
    return best


class StatisticsService:
    """Aggregates over the blogs currently stored."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def overview(self) -> StatisticsRead:
        blogs = BlogService(self.db).list_records()
        return StatisticsRead(
            total_likes=total_likes(blogs),
            favorite_blog=favorite_blog(blogs),
            most_blogs=most_blogs(blogs),
            most_likes=most_likes(blogs),
        )
