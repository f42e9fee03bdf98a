"""
api/routes/tenants.py
---------------------
Tenant resource endpoints.

GET    /tenants/{cognito_id}                           - Profile with favorites.
POST   /tenants                                        - Create on first signup.
PUT    /tenants/{cognito_id}                           - Update contact details.
GET    /tenants/{cognito_id}/current-residences        - Properties lived in.
POST   /tenants/{cognito_id}/favorites/{property_id}   - Add a favorite.
DELETE /tenants/{cognito_id}/favorites/{property_id}   - Remove a favorite.

Every handler runs inside translate_errors(), so a database or geometry
failure becomes a 500 whose message starts with the operation's prefix.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from rentals.core.exceptions import translate_errors
from rentals.dependencies import get_tenant_service
from rentals.schemas.property import ResidenceRead
from rentals.schemas.tenant import (
    TenantCreate,
    TenantRead,
    TenantUpdate,
    TenantWithFavorites,
)
from rentals.services.tenant_service import TenantService

router = APIRouter(prefix="/tenants", tags=["Tenants"])

Service = Annotated[TenantService, Depends(get_tenant_service)]
CognitoId = Annotated[str, Path(min_length=1)]
PropertyId = Annotated[int, Path(gt=0)]


@router.get(
    "/{cognito_id}",
    response_model=TenantWithFavorites,
    summary="Get a tenant with their favorite properties",
)
async def get_tenant(cognito_id: CognitoId, service: Service) -> TenantWithFavorites:
    with translate_errors("Error retrieving tenant"):
        tenant = await service.get_tenant(cognito_id)
        return TenantWithFavorites.model_validate(tenant)


@router.post(
    "",
    response_model=TenantRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a tenant",
)
async def create_tenant(body: TenantCreate, service: Service) -> TenantRead:
    """
    Called once after signup with the identity provider's subject id.
    A second call with the same cognitoId is rejected with 409.
    """
    with translate_errors("Error creating tenant"):
        tenant = await service.create_tenant(body)
        return TenantRead.model_validate(tenant)


@router.put(
    "/{cognito_id}",
    response_model=TenantRead,
    summary="Update a tenant's name, email or phone number",
)
async def update_tenant(
    cognito_id: CognitoId, body: TenantUpdate, service: Service
) -> TenantRead:
    with translate_errors("Error updating tenant"):
        tenant = await service.update_tenant(cognito_id, body)
        return TenantRead.model_validate(tenant)


@router.get(
    "/{cognito_id}/current-residences",
    response_model=list[ResidenceRead],
    summary="List the properties a tenant currently lives in",
)
async def get_current_residences(
    cognito_id: CognitoId, service: Service
) -> list[ResidenceRead]:
    """Each property's location carries decoded {longitude, latitude} coordinates."""
    with translate_errors("Error retrieving manager properties"):
        return await service.get_current_residences(cognito_id)


@router.post(
    "/{cognito_id}/favorites/{property_id}",
    response_model=TenantWithFavorites,
    summary="Add a property to a tenant's favorites",
)
async def add_favorite_property(
    cognito_id: CognitoId, property_id: PropertyId, service: Service
) -> TenantWithFavorites:
    with translate_errors("Error adding favorite property"):
        tenant = await service.add_favorite_property(cognito_id, property_id)
        return TenantWithFavorites.model_validate(tenant)


@router.delete(
    "/{cognito_id}/favorites/{property_id}",
    response_model=TenantWithFavorites,
    summary="Remove a property from a tenant's favorites",
)
async def remove_favorite_property(
    cognito_id: CognitoId, property_id: PropertyId, service: Service
) -> TenantWithFavorites:
    with translate_errors("Error removing favorite property"):
        tenant = await service.remove_favorite_property(cognito_id, property_id)
        return TenantWithFavorites.model_validate(tenant)
