"""
schemas/tenant.py
-----------------
Pydantic request/response models for Tenant.

Naming convention:
  TenantCreate / TenantUpdate → inbound request bodies
  TenantRead                  → outbound tenant profile
  TenantWithFavorites         → outbound profile plus favorite properties
"""

from datetime import datetime
from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, Field, StringConstraints

from rentals.schemas.property import CamelModel, PropertyRead


def _check_email(value: str) -> str:
    """Validate the address but keep it exactly as submitted."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


Email = Annotated[str, AfterValidator(_check_email)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class TenantCreate(CamelModel):
    # Opaque subject id: stored verbatim, only blank values are rejected
    cognito_id: str = Field(
        ...,
        max_length=255,
        pattern=r"\S",
        description="Subject id issued by the identity provider",
    )
    name: Name = Field(..., examples=["Jane Doe"])
    email: Email
    phone_number: str = Field(..., max_length=50, examples=["+1 555 0100"])


class TenantUpdate(CamelModel):
    """Every field is optional; fields left out of the body are not touched."""
    name: Optional[Name] = None
    email: Optional[Email] = None
    phone_number: Optional[str] = Field(default=None, max_length=50)


class TenantRead(CamelModel):
    id: int
    cognito_id: str
    name: str
    email: str
    phone_number: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TenantWithFavorites(TenantRead):
    favorites: list[PropertyRead] = []
