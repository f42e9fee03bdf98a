"""
core/exceptions.py
------------------
Typed error taxonomy shared by the service and route layers.

Every AppError carries the HTTP status it maps to; the exception handlers
registered in main.py render it as {"message": ...}. Services raise the
specific subclasses; anything the persistence layer throws is wrapped into
an InfraError by translate_errors() with the operation's message prefix.
"""

from contextlib import contextmanager
from typing import Iterator

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class InfraError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InvalidGeometryError(ValueError):
    """Raised when a stored geometry cannot be decoded into coordinates."""


@contextmanager
def translate_errors(prefix: str) -> Iterator[None]:
    """
    Wrap persistence and decoding failures as InfraError("<prefix>: <cause>").

    Usage:
        with translate_errors("Error retrieving tenant"):
            tenant = await service.get_tenant(cognito_id)
    """
    try:
        yield
    except AppError:
        raise
    except (SQLAlchemyError, InvalidGeometryError) as exc:
        raise InfraError(f"{prefix}: {exc}") from exc
