"""
models/location.py
------------------
Street address plus a PostGIS geography point.

coordinates is stored as geography(POINT, 4326), longitude first. It is
never serialised directly: readers select ST_AsText(coordinates) and decode
the WKT with rentals.core.geo.parse_point.
"""

from geoalchemy2 import Geography
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.db.base import Base


class Location(Base):
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    coordinates = mapped_column(
        Geography(geometry_type="POINT", srid=4326), nullable=False
    )

    property: Mapped["Property"] = relationship(  # noqa: F821
        "Property", back_populates="location", uselist=False
    )

    def __repr__(self) -> str:
        return f"<Location id={self.id} city={self.city}>"
