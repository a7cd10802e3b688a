"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (blogs, users, login, statistics) exposes a
router defined in ``api/v1/endpoints`` and keeps its business logic
in ``services``.  Versioning is handled by grouping routers under the
``api/<version>/`` hierarchy.
"""

from .main import app, create_app  # noqa: F401
