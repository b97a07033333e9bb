"""
Main entrypoint for the Usuarios API.

This module assembles the FastAPI application.  ``create_app`` sets up
logging, creates the in-memory user store, includes the routers,
installs the plain-text error handlers and mounts the static asset
directory.  An application built from the default settings is created
at import time as ``app`` so it can be served directly, e.g.::

    uvicorn usuarios_api.app.main:app --reload
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.endpoints import root
from .api.router import router as api_router
from .core.access_log import log_request
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import UserStore

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; defaults to the module-level settings read from
        the environment.
    store : Optional[UserStore]
        Store the routes operate on.  When omitted a store holding the
        five initial users is created, so every application instance
        starts from the same state.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else UserStore.seeded()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    if settings.is_development:
        app.middleware("http")(log_request)

    app.include_router(root.router)
    app.include_router(api_router, prefix="/api")

    # Mounted last so that the API routes above take precedence.
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning("Static directory %s not found; static files disabled", static_dir)

    logger.info("Application: %s (%s)", settings.project_name, settings.environment)
    return app


app = create_app()
