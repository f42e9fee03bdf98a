from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi.testclient import TestClient

from main import create_application
from rentals.core.exceptions import ConflictError, NotFoundError
from rentals.dependencies import get_tenant_repository

POSTED = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_property(property_id: int, **overrides: Any) -> SimpleNamespace:
    location = SimpleNamespace(
        id=property_id,
        address=f"{property_id} Market St",
        city="San Francisco",
        state="CA",
        country="United States",
        postal_code="94103",
        coordinates=b"\x01\x01",  # raw geometry, never serialised
    )
    fields: dict[str, Any] = {
        "id": property_id,
        "name": f"Property {property_id}",
        "description": "Sunny two bedroom",
        "price_per_month": 2500.0,
        "security_deposit": 2500.0,
        "application_fee": 50.0,
        "photo_urls": [],
        "amenities": ["WasherDryer"],
        "highlights": [],
        "is_pets_allowed": True,
        "is_parking_included": False,
        "beds": 2,
        "baths": 1.5,
        "square_feet": 900,
        "property_type": "Apartment",
        "posted_date": POSTED,
        "average_rating": 4.5,
        "number_of_reviews": 12,
        "location_id": property_id,
        "manager_cognito_id": "manager_1",
        "location": location,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class FakeTenantRepository:
    """In-memory stand-in for TenantRepository with the same contract."""

    def __init__(self) -> None:
        self.tenants: dict[str, SimpleNamespace] = {}
        self.properties: dict[int, SimpleNamespace] = {}
        self.favorites: set[tuple[int, int]] = set()
        self.residences: set[tuple[int, int]] = set()
        self.coordinates: dict[int, str | None] = {}
        self.error: Exception | None = None
        self.commit_error: Exception | None = None
        self.commits = 0
        self._next_id = 1

    # ── test helpers ─────────────────────────────────────────────────────────

    def add_tenant(self, cognito_id: str, **fields: Any) -> SimpleNamespace:
        tenant = SimpleNamespace(
            id=self._next_id,
            cognito_id=cognito_id,
            name=fields.get("name", "Jane Doe"),
            email=fields.get("email", "jane@example.com"),
            phone_number=fields.get("phone_number", "+1 555 0100"),
            created_at=POSTED,
            updated_at=POSTED,
            favorites=[],
        )
        self._next_id += 1
        self.tenants[cognito_id] = tenant
        return tenant

    def add_property(self, property_id: int, wkt: str | None = "POINT(-122.4194 37.7749)") -> SimpleNamespace:
        prop = make_property(property_id)
        self.properties[property_id] = prop
        self.coordinates[property_id] = wkt
        return prop

    def _raise_if_broken(self) -> None:
        if self.error is not None:
            raise self.error

    # ── repository contract ──────────────────────────────────────────────────

    async def get_by_cognito_id(self, cognito_id: str, with_favorites: bool = False):
        self._raise_if_broken()
        tenant = self.tenants.get(cognito_id)
        if tenant is not None:
            tenant.favorites = [
                self.properties[pid]
                for tid, pid in sorted(self.favorites, key=lambda pair: pair[1])
                if tid == tenant.id
            ]
        return tenant

    async def create(self, data):
        self._raise_if_broken()
        if data.cognito_id in self.tenants:
            raise ConflictError(f"Tenant '{data.cognito_id}' already exists")
        return self.add_tenant(
            data.cognito_id,
            name=data.name,
            email=data.email,
            phone_number=data.phone_number,
        )

    async def update(self, tenant, fields):
        self._raise_if_broken()
        for name, value in fields.items():
            setattr(tenant, name, value)
        return tenant

    async def list_residences(self, cognito_id: str):
        self._raise_if_broken()
        tenant = self.tenants.get(cognito_id)
        if tenant is None:
            return []
        return [
            (self.properties[pid], self.coordinates[pid])
            for tid, pid in sorted(self.residences, key=lambda pair: pair[1])
            if tid == tenant.id
        ]

    async def add_favorite(self, tenant_id: int, property_id: int) -> bool:
        self._raise_if_broken()
        if property_id not in self.properties:
            raise NotFoundError("Property not found")
        if (tenant_id, property_id) in self.favorites:
            return False
        self.favorites.add((tenant_id, property_id))
        return True

    async def remove_favorite(self, tenant_id: int, property_id: int) -> bool:
        self._raise_if_broken()
        if (tenant_id, property_id) not in self.favorites:
            return False
        self.favorites.discard((tenant_id, property_id))
        return True

    async def commit(self) -> None:
        if self.commit_error is not None:
            raise self.commit_error
        self.commits += 1


@pytest.fixture
def repo() -> FakeTenantRepository:
    return FakeTenantRepository()


@pytest.fixture
def client(repo: FakeTenantRepository) -> TestClient:
    app = create_application()
    app.dependency_overrides[get_tenant_repository] = lambda: repo
    return TestClient(app, raise_server_exceptions=False)
