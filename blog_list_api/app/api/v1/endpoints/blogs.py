"""
Blog endpoints for API v1.

Listing and reading are public.  Creating, updating and deleting
require a bearer token; updates and deletions are further restricted
to the blog's owner by ``BlogService``.  Identifiers that are not
positive integers are rejected with 400 ``malformatted id``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from blog_list_api.app.core.db import Database, get_db
from blog_list_api.app.core.errors import parse_id
from blog_list_api.app.core.security import get_current_user
from blog_list_api.app.schemas.blog import BlogCreate, BlogRead, BlogUpdate, BlogWithOwner
from blog_list_api.app.schemas.user import UserInDB
from blog_list_api.app.services.blog_service import BlogService


router = APIRouter()


def get_blog_service(db: Database = Depends(get_db)) -> BlogService:
    return BlogService(db)


@router.get("/", response_model=List[BlogWithOwner])
async def list_blogs(service: BlogService = Depends(get_blog_service)) -> List[BlogWithOwner]:
    """Return all blogs, each with its owner's ``id``, ``username`` and ``name``."""
    return service.list_blogs()


@router.get("/{blog_id}", response_model=BlogRead)
async def get_blog(blog_id: str, service: BlogService = Depends(get_blog_service)) -> BlogRead:
    return service.get_blog(parse_id(blog_id))


@router.post("/", response_model=BlogRead, status_code=status.HTTP_201_CREATED)
async def create_blog(
    blog: BlogCreate,
    current_user: UserInDB = Depends(get_current_user),
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    """Create a blog owned by the authenticated caller.

    ``title`` and ``url`` are required; ``likes`` defaults to 0.
    """
    return service.create_blog(blog, current_user)


@router.put("/{blog_id}", response_model=Optional[BlogRead])
async def update_blog(
    blog_id: str,
    updates: BlogUpdate,
    current_user: UserInDB = Depends(get_current_user),
    service: BlogService = Depends(get_blog_service),
) -> Optional[BlogRead]:
    """Update fields of a blog owned by the caller.

    Partial updates are supported.  Returns ``null`` if the blog does
    not exist and 403 if it belongs to someone else.
    """
    return service.update_blog(parse_id(blog_id), updates, current_user)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    current_user: UserInDB = Depends(get_current_user),
    service: BlogService = Depends(get_blog_service),
) -> None:
    """Delete a blog owned by the caller.

    Deleting a blog that does not exist also answers 204.
    """
    service.delete_blog(parse_id(blog_id), current_user)
    return None
