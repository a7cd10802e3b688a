"""
Business logic for users.

``UserService`` registers accounts, authenticates them and lists them
with their blogs.  The service is bound to a ``Database`` at
construction; each method opens and closes its own connection.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import Database
from ..core.errors import NotUniqueError, ValidationError
from ..core.security import hash_password, verify_password
from ..schemas.blog import BlogSummary
from ..schemas.user import UserCreate, UserInDB, UserRead


logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3


class UserService:
    """Service for user accounts."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def create_user(self, data: UserCreate) -> UserRead:
        """Create a new account and return it.

        Raises ``ValidationError`` if the username or password is
        shorter than three characters and ``NotUniqueError`` if the
        username is already taken.
        """
        if len(data.username) < MIN_USERNAME_LENGTH:
            raise ValidationError(
                f"username must be {MIN_USERNAME_LENGTH} or more characters long"
            )
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"password must be {MIN_PASSWORD_LENGTH} or more characters long"
            )

        password_hash = hash_password(data.password)
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO users (username, name, password_hash) VALUES (?, ?, ?)",
                    (data.username, data.name, password_hash),
                )
                user_id = cursor.lastrowid
        except sqlite3.IntegrityError as e:
            raise NotUniqueError("expected `username` to be unique") from e
        logger.info("Registered user %s with id %s", data.username, user_id)
        return UserRead(id=user_id, username=data.username, name=data.name, blogs=[])

    def list_users(self) -> List[UserRead]:
        """Return every account with its blogs in creation order."""
        conn = self.db.connect()
        try:
            cursor = conn.cursor()
            user_rows = cursor.execute(
                "SELECT id, username, name FROM users ORDER BY id"
            ).fetchall()
            blog_rows = cursor.execute(
                "SELECT id, title, author, url, likes, user_id FROM blogs ORDER BY id"
            ).fetchall()
        finally:
            conn.close()

        blogs_by_user: dict[int, List[BlogSummary]] = {}
        for row in blog_rows:
            blogs_by_user.setdefault(row["user_id"], []).append(
                BlogSummary(
                    id=row["id"],
                    title=row["title"],
                    author=row["author"],
                    url=row["url"],
                    likes=row["likes"],
                )
            )
        return [
            UserRead(
                id=row["id"],
                username=row["username"],
                name=row["name"],
                blogs=blogs_by_user.get(row["id"], []),
            )
            for row in user_rows
        ]

    def get_user_by_id(self, user_id: int) -> Optional[UserInDB]:
        conn = self.db.connect()
        try:
            row = conn.execute(
                "SELECT id, username, name, password_hash FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return UserInDB(
            id=row["id"],
            username=row["username"],
            name=row["name"],
            password_hash=row["password_hash"],
        )

    def authenticate(self, username: str, password: str) -> Optional[UserInDB]:
        """Return the account if ``password`` matches, otherwise ``None``."""
        conn = self.db.connect()
        try:
            row = conn.execute(
                "SELECT id, username, name, password_hash FROM users WHERE username = ?",
                (username,),
            ).fetchone()
        finally:
            conn.close()
        if not row or not verify_password(password, row["password_hash"]):
            return None
        return UserInDB(
            id=row["id"],
            username=row["username"],
            name=row["name"],
            password_hash=row["password_hash"],
        )
