"""
Main entrypoint for the Blog List API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app from a ``Settings`` instance; the collaborators handlers depend on
(the ``Database`` and the ``TokenCodec``) are created here and stored
on ``app.state``.  The module level ``app`` makes it easy to run with
uvicorn, e.g.::

    uvicorn blog_list_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request

from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.logging_config import configure_logging
from .core.security import TokenCodec
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.db = Database(settings.database_url)
    app.state.token_codec = TokenCodec(settings.secret_key, settings.access_token_expire_minutes)

    register_exception_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first start.
        app.state.db.init_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
