"""
Domain errors and their HTTP translation.

Services raise the exceptions defined here; ``register_exception_handlers``
maps each of them to a fixed status code and a ``{"detail": ...}``
JSON body.  Request body validation errors raised by FastAPI are
reported as 400 with a message naming the offending fields.
"""

import logging
import re

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)

# Largest rowid SQLite can store.
MAX_ROW_ID = 2**63 - 1


class BlogListError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedIdError(BlogListError):
    def __init__(self, raw_id: object = None) -> None:
        super().__init__("malformatted id")
        self.raw_id = raw_id


class ValidationError(BlogListError):
    """A field failed validation (e.g. a username that is too short)."""


class NotUniqueError(BlogListError):
    pass


class NotOwnerError(BlogListError):
    status_code = status.HTTP_403_FORBIDDEN


class BlogNotFoundError(BlogListError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, blog_id: int) -> None:
        super().__init__(f"blog {blog_id} not found")
        self.blog_id = blog_id


def parse_id(raw_id: str) -> int:
    """Convert a path identifier into a row id or raise ``MalformedIdError``."""
    if not re.fullmatch(r"[0-9]+", raw_id):
        raise MalformedIdError(raw_id)
    row_id = int(raw_id)
    if row_id > MAX_ROW_ID:
        raise MalformedIdError(raw_id)
    return row_id


def format_validation_errors(errors: list) -> str:
    """Render pydantic error entries as ``"field: reason"`` joined by ``; ``."""
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def blog_list_error_handler(request: Request, exc: BlogListError) -> JSONResponse:
    if isinstance(exc, MalformedIdError):
        logger.warning("%s %s failed: %s %r", request.method, request.url.path, exc.message, exc.raw_id)
    else:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        message = "malformatted json"
    else:
        message = format_validation_errors(errors)
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


async def unknown_endpoint_handler(request: Request, exc: Exception) -> JSONResponse:
    detail = getattr(exc, "detail", None)
    if detail in (None, "Not Found"):
        detail = "unknown endpoint"
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to ``app``."""
    app.add_exception_handler(BlogListError, blog_list_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(status.HTTP_404_NOT_FOUND, unknown_endpoint_handler)
