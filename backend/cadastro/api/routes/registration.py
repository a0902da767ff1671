"""Registration — POST /cadastro creates a registrant.

Invariants:
    - Payload (JSON or form post) validated by RegistrationRequest before the handler runs:
      an invalid payload never reaches the store
    - Success body is a fixed message; submitted fields (password included)
      are never echoed back
    - Duplicate email → 400, storage fault → 500 (via global error handlers)
"""

import logging

from fastapi import APIRouter, Depends, status

from cadastro.api.dependencies import (
    get_registrant_store, get_registration_request,
)
from cadastro.core.repository_protocols import RegistrantRepository
from cadastro.schemas.registrant import MessageResponse, RegistrationRequest

logger = logging.getLogger(__name__)
router = APIRouter(tags=["registration"])

REGISTRATION_SUCCEEDED = "Registration succeeded."


@router.post(
    "/cadastro", response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def register(
    body: RegistrationRequest = Depends(get_registration_request),
    store: RegistrantRepository = Depends(get_registrant_store),
):
    """Register a new user."""
    await store.create(body.model_dump())
    return MessageResponse(message=REGISTRATION_SUCCEEDED)
