"""Route Dependencies — request-scoped collaborators injected by FastAPI.

Invariants:
    - Registration payload accepted as JSON or as an HTML form post
      (application/x-www-form-urlencoded, multipart/form-data)
    - An empty or null body is validated like any other non-object payload:
      it fails the first required rule
    - Pydantic failures re-raised as RequestValidationError so the global
      handler reports them

Design Decisions:
    - Store built per request from get_db: tests override either dependency
    - Body read by hand instead of a typed Body param: FastAPI only parses
      JSON for model params, form posts would arrive as raw bytes
"""

import json
from typing import Any

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from cadastro.infrastructure.database import get_db
from cadastro.schemas.registrant import RegistrationRequest
from cadastro.services.registrant_store import RegistrantStore

FORM_CONTENT_TYPES: tuple[str, ...] = (
    "application/x-www-form-urlencoded", "multipart/form-data",
)


async def get_registrant_store(
    db: AsyncSession = Depends(get_db),
) -> RegistrantStore:
    return RegistrantStore(db)


async def _read_payload(request: Request) -> Any:
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        # Uploaded files are not registration fields
        return {
            key: value for key, value in form.items() if isinstance(value, str)
        }
    body = await request.body()
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except ValueError:  # JSONDecodeError or undecodable bytes
        raise RequestValidationError([{
            "type": "json_invalid",
            "loc": ("body",),
            "msg": "JSON decode error",
            "input": {},
        }])


async def get_registration_request(request: Request) -> RegistrationRequest:
    """Parse and validate the registration body."""
    payload = await _read_payload(request)
    try:
        return RegistrationRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError([
            {**error, "loc": ("body", *error["loc"])}
            for error in e.errors(include_url=False)
        ])
