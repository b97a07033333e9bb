"""
Application package initializer.

The API is split into a few small pieces: ``core`` holds settings,
logging and the in-memory user store, ``schemas`` the pydantic
models and validation rule, ``services`` the operations over the
store and ``api`` the FastAPI routers that expose them over HTTP.
"""

from .main import app  # noqa: F401
