"""
Pydantic building blocks shared by every resource.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, AnyUrl, BaseModel, EmailStr, Field, TypeAdapter, ValidationError

_url_adapter = TypeAdapter(AnyUrl)
_email_adapter = TypeAdapter(EmailStr)


def _check_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except ValidationError as exc:
        raise ValueError("must be a valid URL") from exc
    return value


# Validated like a URL but stored and returned exactly as sent.
Url = Annotated[str, AfterValidator(_check_url)]


def _check_email(value: str) -> str:
    try:
        _email_adapter.validate_python(value)
    except ValidationError as exc:
        raise ValueError("must be a valid email address") from exc
    return value


# Same idea for email: no case or unicode normalisation of the stored value.
Email = Annotated[str, AfterValidator(_check_email)]


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# Naive and date-only input is read as UTC, never as the server's local time.
Timestamp = Annotated[datetime, AfterValidator(_assume_utc)]

# Required text columns must not be blank.
Text = Annotated[str, Field(min_length=1)]


def reject_null(value: Any) -> Any:
    """
    Field validator for update schemas: a NOT NULL column may be omitted, but
    it may not be explicitly set to null. Validators never run on the
    default, so an omitted field still passes.
    """
    if value is None:
        raise ValueError("may be omitted but not set to null")
    return value


class IdRequest(BaseModel):
    id: int = Field(..., ge=1)


class DeleteResponse(BaseModel):
    success: bool


def changed_fields(payload: BaseModel, *, exclude: set[str] | None = None) -> dict[str, Any]:
    """
    Only the fields the caller actually sent, explicit nulls included.
    """
    return payload.model_dump(exclude_unset=True, exclude=exclude)
