"""
services/tenant_service.py
--------------------------
Business logic for the tenant resource.

Service layer is responsible for:
  - Enforcing business rules (tenant must exist, no duplicate favorites)
  - Shaping residences (decoding location geometry)
  - Returning domain objects (ORM models / schemas) to the route layer
  - Never returning HTTP responses (that's the route's job)

All SQL lives in TenantRepository; errors are raised as the typed
exceptions of rentals.core.exceptions.
"""

from rentals.core.exceptions import ConflictError, NotFoundError
from rentals.core.geo import parse_point
from rentals.core.logging import get_logger
from rentals.models import Property, Tenant
from rentals.repositories.tenant_repository import TenantRepository
from rentals.schemas.property import LocationRead, PropertyRead, ResidenceRead
from rentals.schemas.tenant import TenantCreate, TenantUpdate

logger = get_logger(__name__)

TENANT_NOT_FOUND = "Tenant not found"


class TenantService:

    def __init__(self, repository: TenantRepository) -> None:
        self.repository = repository

    async def _require_tenant(
        self, cognito_id: str, with_favorites: bool = False
    ) -> Tenant:
        tenant = await self.repository.get_by_cognito_id(
            cognito_id, with_favorites=with_favorites
        )
        if tenant is None:
            raise NotFoundError(TENANT_NOT_FOUND)
        return tenant

    async def get_tenant(self, cognito_id: str) -> Tenant:
        """Tenant with favorites. Raises NotFoundError."""
        return await self._require_tenant(cognito_id, with_favorites=True)

    async def create_tenant(self, data: TenantCreate) -> Tenant:
        """
        Create a tenant on first signup.
        Raises ConflictError if the cognito_id is already registered.
        """
        tenant = await self.repository.create(data)
        await self.repository.commit()
        logger.info("Tenant created", tenant_id=tenant.id, cognito_id=tenant.cognito_id)
        return tenant

    async def update_tenant(self, cognito_id: str, data: TenantUpdate) -> Tenant:
        """
        Write the fields present in the request; omitted (or null) fields
        keep their stored value.
        """
        tenant = await self._require_tenant(cognito_id)
        fields = data.model_dump(exclude_unset=True, exclude_none=True)
        if not fields:
            return tenant

        tenant = await self.repository.update(tenant, fields)
        await self.repository.commit()
        logger.info("Tenant updated", cognito_id=cognito_id, fields=sorted(fields))
        return tenant

    async def get_current_residences(self, cognito_id: str) -> list[ResidenceRead]:
        rows = await self.repository.list_residences(cognito_id)
        return [_residence(prop, coordinates) for prop, coordinates in rows]

    async def add_favorite_property(self, cognito_id: str, property_id: int) -> Tenant:
        """
        Raises NotFoundError for an unknown tenant or property, and
        ConflictError when the property is already a favorite.
        """
        tenant = await self._require_tenant(cognito_id)
        added = await self.repository.add_favorite(tenant.id, property_id)
        if not added:
            raise ConflictError("Property already added as favorite")
        await self.repository.commit()

        logger.info("Favorite added", cognito_id=cognito_id, property_id=property_id)
        return await self._require_tenant(cognito_id, with_favorites=True)

    async def remove_favorite_property(
        self, cognito_id: str, property_id: int
    ) -> Tenant:
        """Removing a property that is not a favorite is a no-op."""
        tenant = await self._require_tenant(cognito_id)
        removed = await self.repository.remove_favorite(tenant.id, property_id)
        await self.repository.commit()
        if removed:
            logger.info(
                "Favorite removed", cognito_id=cognito_id, property_id=property_id
            )
        return await self._require_tenant(cognito_id, with_favorites=True)


def _residence(prop: Property, coordinates: str | None) -> ResidenceRead:
    location = prop.location
    return ResidenceRead(
        **PropertyRead.model_validate(prop).model_dump(),
        location=LocationRead(
            id=location.id,
            address=location.address,
            city=location.city,
            state=location.state,
            country=location.country,
            postal_code=location.postal_code,
            coordinates=parse_point(coordinates),
        ),
    )
