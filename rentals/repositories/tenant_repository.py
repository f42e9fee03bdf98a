"""
repositories/tenant_repository.py
---------------------------------
Every SQL statement issued on behalf of the tenant resource.

The repository knows nothing about HTTP: it returns ORM objects (or None),
and raises the typed errors from rentals.core.exceptions only for constraint
violations it can name (duplicate tenant, unknown property). Anything else
from SQLAlchemy propagates unchanged.
"""

from typing import Any, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, selectinload

from rentals.core.exceptions import ConflictError, NotFoundError
from rentals.models import Location, Property, Tenant, tenant_favorites
from rentals.schemas.tenant import TenantCreate


class TenantRepository:

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_cognito_id(
        self, cognito_id: str, with_favorites: bool = False
    ) -> Optional[Tenant]:
        stmt = select(Tenant).where(Tenant.cognito_id == cognito_id)
        if with_favorites:
            # populate_existing refreshes a tenant already in the identity map,
            # so favorites written earlier in this session are visible.
            stmt = stmt.options(selectinload(Tenant.favorites)).execution_options(
                populate_existing=True
            )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, data: TenantCreate) -> Tenant:
        """Insert a tenant. Raises ConflictError if cognito_id is taken."""
        tenant = Tenant(
            cognito_id=data.cognito_id,
            name=data.name,
            email=data.email,
            phone_number=data.phone_number,
        )
        self.db.add(tenant)
        try:
            await self.db.flush()  # Trigger DB constraints before commit
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(f"Tenant '{data.cognito_id}' already exists")
        await self.db.refresh(tenant)
        return tenant

    async def update(self, tenant: Tenant, fields: dict[str, Any]) -> Tenant:
        for name, value in fields.items():
            setattr(tenant, name, value)
        await self.db.flush()
        await self.db.refresh(tenant)
        return tenant

    async def list_residences(
        self, cognito_id: str
    ) -> list[tuple[Property, Optional[str]]]:
        """
        Properties the tenant lives in, each paired with its location's
        coordinates as WKT. Both come back in a single statement.
        """
        stmt = (
            select(Property, func.ST_AsText(Location.coordinates))
            .join(Property.location)
            .where(Property.tenants.any(Tenant.cognito_id == cognito_id))
            .options(contains_eager(Property.location))
            .order_by(Property.id)
        )
        result = await self.db.execute(stmt)
        return [(prop, coordinates) for prop, coordinates in result.all()]

    async def add_favorite(self, tenant_id: int, property_id: int) -> bool:
        """
        Link a property as favorite in one conditional insert.

        Returns False when the pair already existed. Raises NotFoundError
        when the property does not exist.
        """
        stmt = (
            insert(tenant_favorites)
            .values(tenant_id=tenant_id, property_id=property_id)
            .on_conflict_do_nothing(index_elements=["tenant_id", "property_id"])
        )
        try:
            result = await self.db.execute(stmt)
        except IntegrityError:
            await self.db.rollback()
            raise NotFoundError("Property not found")
        return result.rowcount == 1

    async def remove_favorite(self, tenant_id: int, property_id: int) -> bool:
        """Unlink a favorite. Returns whether a row was actually removed."""
        stmt = delete(tenant_favorites).where(
            tenant_favorites.c.tenant_id == tenant_id,
            tenant_favorites.c.property_id == property_id,
        )
        result = await self.db.execute(stmt)
        return result.rowcount > 0

    async def commit(self) -> None:
        """
        Commit the request's unit of work now, while the caller can still
        attribute a failure to its operation. get_db's final commit is then
        a no-op.
        """
        await self.db.commit()
