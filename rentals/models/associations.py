"""
models/associations.py
----------------------
Association tables for the Tenant <-> Property many-to-many relationships.

Both tables use the (tenant_id, property_id) pair as their primary key, so a
tenant can favorite / reside in a given property at most once. The favorite
insert relies on that key for ON CONFLICT DO NOTHING.
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from rentals.db.base import Base

# Tenant <-> Property they saved as a favorite
tenant_favorites = Table(
    "tenant_favorites",
    Base.metadata,
    Column(
        "tenant_id",
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "property_id",
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)

# Tenant <-> Property they currently live in
tenant_properties = Table(
    "tenant_properties",
    Base.metadata,
    Column(
        "tenant_id",
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "property_id",
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)
