"""
Service layer for user management.

``UserService`` performs the CRUD operations behind the ``/usuarios``
endpoints against the ``UserStore`` it is constructed with.  Failures
are raised as ``ValueError`` subclasses: ``UserNotFoundError`` for an
unknown id and ``UserValidationError`` for a body that fails the name
rule.  The endpoint layer turns these into 404 and 400 responses.

The methods are coroutines to match the rest of the API, but none of
them awaits, so each operation runs to completion without yielding to
another request.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Optional

from fastapi import Depends

from usuarios_api.app.core.store import UserRecord, UserStore, get_store
from usuarios_api.app.schemas.user import UserRead, validate_user

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Usuario no encontrado"


class UserNotFoundError(ValueError):
    """No user has the requested id."""

    def __init__(self, user_id: Optional[int]) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.user_id = user_id


class UserValidationError(ValueError):
    """The request body does not satisfy ``UserIn``."""


def parse_user_id(raw: str) -> Optional[int]:
    """Turn a path segment into an id, or ``None`` if it is not a number.

    Any finite decimal is accepted and truncated toward zero, so
    ``"2.5"`` and ``"2.0"`` both refer to user 2.
    """
    if raw is None or "_" in raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value)


class UserService:
    """CRUD operations over a ``UserStore``."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def _require(self, user_id: Optional[int]) -> UserRecord:
        record = self.store.find_by_id(user_id)
        if record is None:
            logger.debug("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return record

    @staticmethod
    def _validated_name(payload: Optional[Mapping[str, Any]]) -> str:
        result = validate_user(payload)
        if result.error is not None:
            logger.info("Rejected user payload: %s", result.error)
            raise UserValidationError(result.error)
        return result.value.nombre

    async def list_users(self) -> List[UserRead]:
        """Return all users in insertion order."""
        return [UserRead.model_validate(record) for record in self.store.all()]

    async def get_user(self, user_id: Optional[int]) -> UserRead:
        return UserRead.model_validate(self._require(user_id))

    async def create_user(self, payload: Optional[Mapping[str, Any]]) -> UserRead:
        """Validate ``payload`` and append a new user.

        The store is left untouched when validation fails.
        """
        nombre = self._validated_name(payload)
        record = self.store.add(nombre)
        return UserRead.model_validate(record)

    async def update_user(self, user_id: Optional[int], payload: Optional[Mapping[str, Any]]) -> UserRead:
        """Rename an existing user.

        The lookup happens before validation, so an unknown id is
        reported as not found even when the body is also invalid.  A
        rejected body leaves the record unchanged.
        """
        record = self._require(user_id)
        nombre = self._validated_name(payload)
        record.nombre = nombre
        logger.info("Renamed user %s to %s", record.id, nombre)
        return UserRead.model_validate(record)

    async def delete_user(self, user_id: Optional[int]) -> UserRead:
        """Remove a user and return it as it was before removal."""
        record = self._require(user_id)
        self.store.remove(record)
        return UserRead.model_validate(record)


def get_user_service(store: UserStore = Depends(get_store)) -> UserService:
    """FastAPI dependency building a ``UserService`` over the app's store."""
    return UserService(store)
