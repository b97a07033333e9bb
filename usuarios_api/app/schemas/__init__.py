"""
Pydantic schema definitions for API payloads.

Request bodies are checked against these models and responses are
serialised through them, which keeps the wire format (``id`` and
``nombre``) separate from the records kept in the store.
"""
