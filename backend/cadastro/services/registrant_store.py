"""Registrant Store — create-if-absent-by-email and point lookups over one table.

Invariants:
    - create checks for the email first, then inserts; a hit raises DuplicateEmailError
      without attempting the insert
    - The unique constraint is the authoritative duplicate signal: an insert that
      loses the check-then-insert race also raises DuplicateEmailError
    - Lookups select only PUBLIC_PROJECTION columns (password never loaded)
    - Ids outside 1..MAX_REGISTRANT_ID are not found without querying
    - Every SQLAlchemy fault is rolled back, logged with detail, and re-raised as
      StorageError (generic client message)

Design Decisions:
    - No lock or transaction spans check-then-insert: the event loop may interleave
      another request between the two awaits, the constraint closes the gap
    - Store wraps a request-scoped AsyncSession: one store per request, no shared state
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cadastro.core.domain_types import (
    MAX_REGISTRANT_ID, PUBLIC_PROJECTION, RegistrantId,
)
from cadastro.core.errors import (
    DuplicateEmailError, ErrorContext, ResourceNotFoundError, StorageError,
)
from cadastro.models.registrant import Registrant

logger = logging.getLogger(__name__)


def _is_email_conflict(exc: IntegrityError) -> bool:
    """SQLite: 'UNIQUE constraint failed: registrants.email'; Postgres names uq_registrants_email."""
    return "email" in str(exc.orig).lower()


class RegistrantStore:
    """Async persistence for registrants. Implements RegistrantRepository."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _storage_guard(self, operation: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Storage failure during {operation}: {e}",
                extra={"operation": operation, "error_code": "STORAGE_ERROR"},
            )
            raise StorageError(operation, str(e)) from e

    async def create(self, payload: dict) -> Registrant:
        """Insert a registrant unless the email is already taken."""
        email = payload["email"]
        if await self._exists(email):
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmailError(email)

        registrant = Registrant(
            first_name=payload["first_name"],
            last_name=payload["last_name"],
            email=email,
            phone=payload.get("phone"),
            password=payload["password"],
        )
        async with self._storage_guard("insert"):
            self._db.add(registrant)
            try:
                await self._db.commit()
            except IntegrityError as e:
                await self._db.rollback()
                if not _is_email_conflict(e):
                    raise
                logger.warning(
                    "Concurrent registration lost the email race",
                    extra={"error_code": "DUPLICATE_EMAIL"},
                )
                raise DuplicateEmailError(email) from e

        logger.info(
            f"Registrant {registrant.id} created",
            extra={"registrant_id": registrant.id},
        )
        return registrant

    async def get_by_id(self, registrant_id: RegistrantId) -> dict:
        row = None
        if 0 < registrant_id <= MAX_REGISTRANT_ID:
            row = await self._fetch_projection(
                Registrant.id == registrant_id, "select_by_id",
            )
        if row is None:
            raise ResourceNotFoundError(
                "Registrant", str(registrant_id),
                ErrorContext(registrant_id=registrant_id),
            )
        return row

    async def get_by_email(self, email: str) -> dict:
        row = await self._fetch_projection(
            Registrant.email == email, "select_by_email",
        )
        if row is None:
            raise ResourceNotFoundError("Registrant", email)
        return row

    async def count_by_email(self, email: str) -> int:
        async with self._storage_guard("count_by_email"):
            result = await self._db.execute(
                select(func.count())
                .select_from(Registrant)
                .where(Registrant.email == email),
            )
            return result.scalar_one()

    async def _exists(self, email: str) -> bool:
        async with self._storage_guard("select_by_email"):
            result = await self._db.execute(
                select(Registrant.id).where(Registrant.email == email),
            )
            return result.scalar_one_or_none() is not None

    async def _fetch_projection(self, criterion, operation: str) -> dict | None:
        columns = [getattr(Registrant, name) for name in PUBLIC_PROJECTION]
        async with self._storage_guard(operation):
            result = await self._db.execute(select(*columns).where(criterion))
            row = result.mappings().one_or_none()
        return dict(row) if row is not None else None
