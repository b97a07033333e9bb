"""
Top‑level package for the Usuarios API.

Makes ``usuarios_api`` importable so that modules under ``app`` can be
referenced with fully qualified names like ``usuarios_api.app.main``,
both when serving with uvicorn and when running the test suite from
the repository root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
