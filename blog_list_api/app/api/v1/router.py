"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers (blogs, users, login,
statistics) under a unified prefix.  When new domains are introduced,
update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import (
    blogs,
    users,
    login,
    statistics,
)

router = APIRouter()

router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(login.router, prefix="/login", tags=["login"])
router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
