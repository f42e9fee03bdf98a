"""
models/__init__.py
------------------
Re-export all models so Alembic's env.py (and create_tables.py) can import
Base and discover all tables via a single import:

    from rentals.models import Base
"""

from rentals.db.base import Base
from rentals.models.associations import tenant_favorites, tenant_properties
from rentals.models.location import Location
from rentals.models.property import Property
from rentals.models.tenant import Tenant

__all__ = [
    "Base",
    "Location",
    "Property",
    "Tenant",
    "tenant_favorites",
    "tenant_properties",
]
