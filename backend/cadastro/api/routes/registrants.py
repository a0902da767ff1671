"""Registrant Lookups — read-only point queries by id and by email.

Invariants:
    - Both lookups return the same projection: {id, first_name, email}
    - Missing registrant → 404; reads have no side effects
"""

from fastapi import APIRouter, Depends

from cadastro.api.dependencies import get_registrant_store
from cadastro.core.domain_types import RegistrantId
from cadastro.core.repository_protocols import RegistrantRepository
from cadastro.schemas.registrant import RegistrantSummary

router = APIRouter(prefix="/usuario", tags=["registrants"])


@router.get("/id/{registrant_id}", response_model=RegistrantSummary)
async def get_registrant_by_id(
    registrant_id: int,
    store: RegistrantRepository = Depends(get_registrant_store),
):
    """Look up a registrant by id."""
    return await store.get_by_id(RegistrantId(registrant_id))


@router.get("/email/{email}", response_model=RegistrantSummary)
async def get_registrant_by_email(
    email: str,
    store: RegistrantRepository = Depends(get_registrant_store),
):
    """Look up a registrant by exact email."""
    return await store.get_by_email(email)
