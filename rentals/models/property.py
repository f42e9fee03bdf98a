"""
models/property.py
------------------
Rental property ORM model.

Properties are listed and edited by managers elsewhere; the tenant resource
only reads them (residences) and links them (favorites).
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.db.base import Base
from rentals.models.associations import tenant_favorites, tenant_properties


class Property(Base):
    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Pricing
    price_per_month: Mapped[float] = mapped_column(Float, nullable=False)
    security_deposit: Mapped[float] = mapped_column(Float, nullable=False)
    application_fee: Mapped[float] = mapped_column(Float, nullable=False)

    # Listing details
    photo_urls: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list
    )
    amenities: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list
    )
    highlights: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list
    )
    is_pets_allowed: Mapped[bool] = mapped_column(Boolean, default=False)
    is_parking_included: Mapped[bool] = mapped_column(Boolean, default=False)
    beds: Mapped[int] = mapped_column(Integer, nullable=False)
    baths: Mapped[float] = mapped_column(Float, nullable=False)
    square_feet: Mapped[int] = mapped_column(Integer, nullable=False)
    property_type: Mapped[str] = mapped_column(String(50), nullable=False)

    posted_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    average_rating: Mapped[Optional[float]] = mapped_column(Float, default=0)
    number_of_reviews: Mapped[Optional[int]] = mapped_column(Integer, default=0)

    location_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("locations.id"), unique=True, nullable=False
    )
    manager_cognito_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )

    # Relationships
    location: Mapped["Location"] = relationship(  # noqa: F821
        "Location", back_populates="property"
    )
    tenants: Mapped[list["Tenant"]] = relationship(  # noqa: F821
        "Tenant", secondary=tenant_properties, back_populates="properties"
    )
    favorited_by: Mapped[list["Tenant"]] = relationship(  # noqa: F821
        "Tenant", secondary=tenant_favorites, back_populates="favorites"
    )

    def __repr__(self) -> str:
        return f"<Property id={self.id} name={self.name}>"
