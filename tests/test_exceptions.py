import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from rentals.core.exceptions import (
    ConflictError,
    InfraError,
    InvalidGeometryError,
    NotFoundError,
    translate_errors,
)


def test_status_codes() -> None:
    assert NotFoundError("x").status_code == 404
    assert ConflictError("x").status_code == 409
    assert InfraError("x").status_code == 500


def test_database_errors_become_infra_errors_with_prefix() -> None:
    cause = OperationalError("SELECT 1", {}, Exception("server closed the connection"))

    with pytest.raises(InfraError) as excinfo:
        with translate_errors("Error retrieving tenant"):
            raise cause

    assert excinfo.value.message.startswith("Error retrieving tenant: ")
    assert "server closed the connection" in excinfo.value.message
    assert excinfo.value.__cause__ is cause


def test_integrity_errors_are_database_errors_too() -> None:
    with pytest.raises(InfraError):
        with translate_errors("Error creating tenant"):
            raise IntegrityError("INSERT", {}, Exception("null value"))


def test_geometry_errors_become_infra_errors() -> None:
    with pytest.raises(InfraError, match="^Error retrieving manager properties: bad"):
        with translate_errors("Error retrieving manager properties"):
            raise InvalidGeometryError("bad")


def test_typed_errors_pass_through_untouched() -> None:
    with pytest.raises(NotFoundError, match="Tenant not found"):
        with translate_errors("Error retrieving tenant"):
            raise NotFoundError("Tenant not found")


def test_unrelated_errors_are_not_wrapped() -> None:
    with pytest.raises(KeyError):
        with translate_errors("Error retrieving tenant"):
            raise KeyError("oops")
