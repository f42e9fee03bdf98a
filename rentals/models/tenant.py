"""
models/tenant.py
----------------
Tenant (renter) ORM model.

A tenant is created on first signup and is addressed everywhere by the
identity provider's subject id (cognito_id), which is unique and never
changes after creation. The integer id is internal and only used as the
foreign key of the association tables.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentals.db.base import Base, TimestampMixin
from rentals.models.associations import tenant_favorites, tenant_properties


class Tenant(Base, TimestampMixin):
    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cognito_id: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)

    # Relationships
    favorites: Mapped[list["Property"]] = relationship(  # noqa: F821
        "Property",
        secondary=tenant_favorites,
        back_populates="favorited_by",
        order_by="Property.id",
    )
    properties: Mapped[list["Property"]] = relationship(  # noqa: F821
        "Property",
        secondary=tenant_properties,
        back_populates="tenants",
    )

    def __repr__(self) -> str:
        return f"<Tenant id={self.id} cognito_id={self.cognito_id}>"
