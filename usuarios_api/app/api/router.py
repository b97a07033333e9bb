"""
Top‑level router for the API.

Aggregates the resource routers.  ``main.py`` includes this router
under the ``/api`` prefix; the root greeting lives outside it.
"""

from fastapi import APIRouter

from .endpoints import usuarios

router = APIRouter()

router.include_router(usuarios.router, prefix="/usuarios", tags=["usuarios"])
