"""Entry point for the Blog List API.

Launches the FastAPI application with Uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3003``); all other configuration such as
``SECRET_KEY`` and ``DATABASE_URL`` is read by ``Settings``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from blog_list_api.app.core.config import settings
from blog_list_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Blog List API stopped")


if __name__ == "__main__":
    main()
