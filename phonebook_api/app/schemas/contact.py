"""
Pydantic schemas for contacts.

``ContactWrite`` is the payload accepted by create and update
requests, ``ContactRead`` is what the API returns.  ``email`` is
deliberately free-form: any string is accepted, including ones that
are not valid addresses.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ContactWrite(BaseModel):
    """Payload for creating or replacing a contact.

    ``name`` and ``phone`` must be present and truthy; numbers are
    stored as their text form.  A missing or ``null`` email becomes an
    empty string.
    """

    name: str = Field(..., min_length=1, examples=["Ron Levi"])
    phone: str = Field(..., min_length=1, examples=["050-111-2233"])
    email: str = Field("", examples=["ron@example.com"])

    @field_validator("name", "phone", mode="before")
    @classmethod
    def required_text(cls, v: Any) -> Any:
        if not v:
            raise ValueError("field is required")
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("email", mode="before")
    @classmethod
    def optional_text(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ContactRead(BaseModel):
    """Schema for a stored contact."""

    id: str
    name: str
    phone: str
    email: str


class ServiceInfo(BaseModel):
    """Body of the liveness probe."""

    ok: bool
    service: str
    db: str
