"""
Business logic for blogs.

``BlogService`` lists, creates, updates and deletes blogs in SQLite.
Creation always records the authenticated caller as the owner.
Updates and deletions run the ownership rule (``can_mutate``) first;
a request naming a blog that does not exist is a no‑op.
"""

import logging
from typing import List, Optional

from ..core.db import Database
from ..core.errors import BlogNotFoundError, NotOwnerError
from ..core.security import can_mutate
from ..schemas.blog import BlogCreate, BlogOwner, BlogRead, BlogUpdate, BlogWithOwner
from ..schemas.user import UserInDB


logger = logging.getLogger(__name__)

BLOG_COLUMNS = "id, title, author, url, likes, user_id"


def _row_to_blog(row) -> BlogRead:
    return BlogRead(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        url=row["url"],
        likes=row["likes"],
        user=row["user_id"],
    )


class BlogService:
    """Service for blog records."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def list_records(self) -> List[BlogRead]:
        """Return every blog as stored, ordered by id."""
        conn = self.db.connect()
        try:
            rows = conn.execute(f"SELECT {BLOG_COLUMNS} FROM blogs ORDER BY id").fetchall()
        finally:
            conn.close()
        return [_row_to_blog(row) for row in rows]

    def list_blogs(self) -> List[BlogWithOwner]:
        """Return every blog with its owner projected to ``{id, username, name}``."""
        conn = self.db.connect()
        try:
            rows = conn.execute(
                """
                SELECT b.id, b.title, b.author, b.url, b.likes,
                       u.id AS owner_id, u.username AS owner_username, u.name AS owner_name
                FROM blogs b
                LEFT JOIN users u ON u.id = b.user_id
                ORDER BY b.id
                """
            ).fetchall()
        finally:
            conn.close()
        blogs: List[BlogWithOwner] = []
        for row in rows:
            owner = None
            if row["owner_id"] is not None:
                owner = BlogOwner(
                    id=row["owner_id"],
                    username=row["owner_username"],
                    name=row["owner_name"],
                )
            blogs.append(
                BlogWithOwner(
                    id=row["id"],
                    title=row["title"],
                    author=row["author"],
                    url=row["url"],
                    likes=row["likes"],
                    user=owner,
                )
            )
        return blogs

    def find_blog(self, blog_id: int) -> Optional[BlogRead]:
        conn = self.db.connect()
        try:
            row = conn.execute(
                f"SELECT {BLOG_COLUMNS} FROM blogs WHERE id = ?", (blog_id,)
            ).fetchone()
        finally:
            conn.close()
        return _row_to_blog(row) if row else None

    def get_blog(self, blog_id: int) -> BlogRead:
        """Return a single blog or raise ``BlogNotFoundError``."""
        blog = self.find_blog(blog_id)
        if blog is None:
            raise BlogNotFoundError(blog_id)
        return blog

    def create_blog(self, data: BlogCreate, owner: UserInDB) -> BlogRead:
        """Store a new blog owned by ``owner`` and return it."""
        likes = data.likes or 0
        with self.db.cursor() as cursor:
            cursor.execute(
                "INSERT INTO blogs (title, author, url, likes, user_id) VALUES (?, ?, ?, ?, ?)",
                (data.title, data.author, data.url, likes, owner.id),
            )
            blog_id = cursor.lastrowid
        logger.info("User %s created blog %s '%s'", owner.username, blog_id, data.title)
        return BlogRead(
            id=blog_id,
            title=data.title,
            author=data.author,
            url=data.url,
            likes=likes,
            user=owner.id,
        )

    def update_blog(
        self, blog_id: int, updates: BlogUpdate, acting_user: UserInDB
    ) -> Optional[BlogRead]:
        """Apply the provided fields of ``updates`` to a blog.

        Returns the updated blog, or ``None`` if no blog has this id.
        Raises ``NotOwnerError`` if ``acting_user`` does not own it.
        Fields that are absent or null in ``updates`` are left as they are.
        """
        blog = self.find_blog(blog_id)
        if blog is None:
            logger.info("Update of missing blog %s ignored", blog_id)
            return None
        if not can_mutate(acting_user.id, blog):
            raise NotOwnerError("cannot update blog of someone else")

        changes = {k: v for k, v in updates.model_dump().items() if v is not None}
        if changes:
            assignments = ", ".join(f"{field} = ?" for field in changes)
            values = list(changes.values()) + [blog_id]
            with self.db.cursor() as cursor:
                cursor.execute(
                    f"UPDATE blogs SET {assignments}, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    tuple(values),
                )
            logger.info("User %s updated blog %s: %s", acting_user.username, blog_id, changes)
        return self.find_blog(blog_id)

    def delete_blog(self, blog_id: int, acting_user: UserInDB) -> None:
        """Delete a blog owned by ``acting_user``.

        A missing blog is ignored.  Raises ``NotOwnerError`` if
        ``acting_user`` does not own the blog.
        """
        blog = self.find_blog(blog_id)
        if blog is None:
            logger.info("Delete of missing blog %s ignored", blog_id)
            return
        if not can_mutate(acting_user.id, blog):
            raise NotOwnerError("cannot delete blog of someone else")
        with self.db.cursor() as cursor:
            cursor.execute("DELETE FROM blogs WHERE id = ?", (blog_id,))
        logger.info("User %s deleted blog %s", acting_user.username, blog_id)
