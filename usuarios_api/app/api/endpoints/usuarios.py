"""
User endpoints.

CRUD routes for the in-memory ``usuarios`` collection.  Records are
returned as JSON ``{"id": ..., "nombre": ...}``; errors are returned
as plain text (see the exception handler in ``main.py``).

Path ids are taken as strings and parsed by ``parse_user_id`` so that
an id which is not a number is reported as an unknown user (404)
rather than a request validation error.

Create and update accept the body either as a JSON object or as a
form (``application/x-www-form-urlencoded`` or ``multipart/form-data``).
Both are handed to the service as a plain dict.
"""

import json
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from usuarios_api.app.schemas.user import UserRead
from usuarios_api.app.services.user_service import (
    UserNotFoundError,
    UserService,
    UserValidationError,
    get_user_service,
    parse_user_id,
)

router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> Optional[Dict[str, Any]]:
    """Return the request body as a dict, or ``None`` when there is none.

    Bodies with any other content type are ignored, which leaves
    ``nombre`` missing.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return dict(form)
    if content_type != "application/json" and not content_type.endswith("+json"):
        return None

    raw = await request.body()
    if not raw.strip():
        return None
    try:
        data = json.loads(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request body: JSON decode error")
    if not isinstance(data, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request body: expected a JSON object")
    return data


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every user in insertion order."""
    return await service.list_users()


@router.get("/{user_id}", response_class=PlainTextResponse)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> str:
    """Return a short text naming the user, or 404."""
    try:
        user = await service.get_user(parse_user_id(user_id))
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return f"Usuario encontrado: {user.nombre}"


@router.post("", response_model=UserRead)
async def create_user(
    payload: Optional[Dict[str, Any]] = Depends(read_payload),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a user from ``nombre``.

    Responds 200 with the new record, or 400 with the first validation
    message.
    """
    try:
        return await service.create_user(payload)
    except UserValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    payload: Optional[Dict[str, Any]] = Depends(read_payload),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Rename a user.  404 for an unknown id, 400 for an invalid name."""
    try:
        return await service.update_user(parse_user_id(user_id), payload)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UserValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{user_id}", response_model=UserRead)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    """Delete a user and return the removed record."""
    try:
        return await service.delete_user(parse_user_id(user_id))
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
