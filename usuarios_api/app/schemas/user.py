"""
Pydantic models for user data.

``UserIn`` is the body accepted by create and update; its only field,
``nombre``, must be a string of at least three characters.  ``UserRead``
is what the API returns for a stored record.

Bodies are not declared as ``UserIn`` parameters on the routes because
FastAPI would answer a bad name with a 422 and a JSON error list.  The
API reports validation failures as 400 with a single plain-text
message instead, so the routes pass the raw body to ``validate_user``.
"""

from typing import Any, Mapping, NamedTuple, Optional

from pydantic import BaseModel, Field, ValidationError

MIN_NAME_LENGTH = 3


class UserIn(BaseModel):
    """Schema for creating or renaming a user."""

    nombre: str = Field(..., min_length=MIN_NAME_LENGTH, examples=["Ana"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    nombre: str

    model_config = {
        "from_attributes": True,
    }


class ValidationResult(NamedTuple):
    """Outcome of ``validate_user``: exactly one of the fields is set."""

    value: Optional[UserIn]
    error: Optional[str]


def _describe(error: Mapping[str, Any]) -> str:
    field = ".".join(str(part) for part in error.get("loc", ())) or "value"
    kind = error.get("type")
    if kind == "missing":
        return f'"{field}" is required'
    if kind == "string_type":
        return f'"{field}" must be a string'
    if kind == "string_too_short":
        if error.get("input") == "":
            return f'"{field}" is not allowed to be empty'
        return f'"{field}" length must be at least {MIN_NAME_LENGTH} characters long'
    return f'"{field}" {error.get("msg", "is invalid")}'


def validate_user(payload: Optional[Mapping[str, Any]]) -> ValidationResult:
    """Check a request body against ``UserIn``.

    Only the ``nombre`` key is looked at; other keys are ignored.  The
    message of the first failing rule is returned in ``error``.
    """
    data = {}
    if payload and "nombre" in payload:
        data["nombre"] = payload["nombre"]
    try:
        return ValidationResult(UserIn.model_validate(data), None)
    except ValidationError as exc:
        return ValidationResult(None, _describe(exc.errors()[0]))
