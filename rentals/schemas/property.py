"""
schemas/property.py
-------------------
Outbound models for properties and their locations.

Wire format is camelCase (pricePerMonth, photoUrls, ...); models are
populated from ORM objects via from_attributes.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for all wire models: snake_case in Python, camelCase in JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Coordinates(CamelModel):
    longitude: float
    latitude: float


class LocationRead(CamelModel):
    id: int
    address: str
    city: str
    state: str
    country: str
    postal_code: str
    coordinates: Optional[Coordinates] = None


class PropertyRead(CamelModel):
    id: int
    name: str
    description: str
    price_per_month: float
    security_deposit: float
    application_fee: float
    photo_urls: list[str] = []
    amenities: list[str] = []
    highlights: list[str] = []
    is_pets_allowed: bool = False
    is_parking_included: bool = False
    beds: int
    baths: float
    square_feet: int
    property_type: str
    posted_date: datetime
    average_rating: Optional[float] = None
    number_of_reviews: Optional[int] = None
    location_id: int
    manager_cognito_id: str


class ResidenceRead(PropertyRead):
    """A property the tenant lives in, with its decoded location."""
    location: LocationRead
