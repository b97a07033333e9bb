"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` that includes every
endpoint module under ``endpoints``.
"""
