from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


def coerce_text(value: Any) -> str:
    """Stringify an arbitrary JSON value the way the browser form would.

    Missing and null become "", booleans are lowercase, integral floats drop
    their ".0", arrays join their items with commas and objects collapse to
    "[object Object]".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(coerce_text(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


class ContactSubmission(BaseModel):
    name: str = ""
    email: str = ""
    message: str = ""

    @field_validator("name", "email", "message", mode="before")
    @classmethod
    def _coerce_and_trim(cls, value: Any) -> str:
        return coerce_text(value).strip()


class ContactAccepted(BaseModel):
    message: str


class ContactError(BaseModel):
    error: str


class ContactValidationError(ContactError):
    errors: dict[str, str] = Field(default_factory=dict)
