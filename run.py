"""Entry point for serving the Usuarios API.

Binds the host and port from the settings (``HOST`` and ``PORT``
environment variables, defaulting to ``0.0.0.0`` and ``3000``) and
serves the application with Uvicorn.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from usuarios_api.app.core.config import settings
from usuarios_api.app.main import app


async def main() -> None:
    """Serve the application built at import time until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=not settings.is_development,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
