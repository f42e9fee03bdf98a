"""
dependencies.py
---------------
FastAPI dependency injection wiring for the tenant resource.

Flow:
  1. get_db opens one AsyncSession per request (commit / rollback / close).
  2. get_tenant_repository binds a TenantRepository to that session.
  3. get_tenant_service hands the repository to the TenantService used by
     the route.

Tests replace get_tenant_repository through app.dependency_overrides to run
the real service and routes against an in-memory store.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rentals.db.session import get_db
from rentals.repositories.tenant_repository import TenantRepository
from rentals.services.tenant_service import TenantService


async def get_tenant_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TenantRepository:
    return TenantRepository(db)


async def get_tenant_service(
    repository: Annotated[TenantRepository, Depends(get_tenant_repository)],
) -> TenantService:
    return TenantService(repository)
