"""
Per-request access logging.

Writes one line per request in the compact ``tiny`` layout::

    GET /api/usuarios 200 171 - 0.412 ms

i.e. method, path with query string, status, response length and time
spent in the app.  ``create_app`` installs it only in the development
environment, where Uvicorn's own access log is switched off by ``run.py``.
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger("usuarios_api.access")


async def log_request(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    start = time.perf_counter()
    response = await call_next(request)
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %s %s - %.3f ms",
        request.method,
        target,
        response.status_code,
        response.headers.get("content-length", "-"),
        elapsed_ms,
    )
    return response
