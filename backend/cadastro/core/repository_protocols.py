"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Registrant persistence accessed through RegistrantRepository
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; validation stays sync and pure
"""

from typing import Protocol

from cadastro.core.domain_types import RegistrantId


class RegistrantLike(Protocol):
    """Structural contract for a persisted registrant."""
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None


class RegistrantRepository(Protocol):
    """Contract for registrant persistence — implemented by shell.

    create raises DuplicateEmailError or StorageError; lookups raise
    ResourceNotFoundError or StorageError.
    """
    async def create(self, payload: dict) -> RegistrantLike: ...
    async def get_by_id(self, registrant_id: RegistrantId) -> dict: ...
    async def get_by_email(self, email: str) -> dict: ...
