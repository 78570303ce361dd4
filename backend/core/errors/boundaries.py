"""Error Boundaries

Mappers that translate layer-specific exceptions (SQLAlchemy) into
AppErrors with the right code and origin.
"""
from __future__ import annotations

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from .builders import (
    db_connection_failed,
    duplicate_key,
    foreign_key_violation,
    internal_error,
    transaction_failed,
)
from .types import AppError, ErrorCode, ErrorContext


class DatabaseErrorMapper:
    """Maps database-layer exceptions to clean API errors."""

    def __init__(self, origin: str = "database"):
        self.origin = origin

    def map_exception(self, exc: Exception) -> AppError:
        """Map SQLAlchemy exception to AppError."""
        if isinstance(exc, IntegrityError):
            return self._map_integrity_error(exc)
        if isinstance(exc, OperationalError):
            return self._map_operational_error(exc)
        if isinstance(exc, SQLAlchemyError):
            return transaction_failed(str(exc), origin=self.origin).error

        return internal_error(
            f"Database error: {exc}",
            origin=self.origin,
            cause=exc,
        ).error

    def _map_integrity_error(self, exc: IntegrityError) -> AppError:
        message = str(exc.orig) if exc.orig else str(exc)
        lowered = message.lower()

        if "unique constraint" in lowered or "duplicate key" in lowered:
            return duplicate_key("record", origin=self.origin).error
        if "foreign key" in lowered:
            return foreign_key_violation("record", "parent", origin=self.origin).error

        return AppError(
            code=ErrorCode.E4013_CHECK_CONSTRAINT,
            message=f"Constraint violation: {message}",
            context=ErrorContext(origin=self.origin),
            cause=exc,
        )

    def _map_operational_error(self, exc: OperationalError) -> AppError:
        message = str(exc.orig) if exc.orig else str(exc)

        if "unable to open" in message.lower() or "connect" in message.lower():
            return db_connection_failed(message, origin=self.origin).error
        return transaction_failed(message, origin=self.origin).error
