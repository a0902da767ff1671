"""Registrant Schemas — Pydantic models for the registration and lookup endpoints.

Invariants:
    - RegistrationRequest runs core rules BEFORE field parsing; a failed rule
      becomes a single RuleViolation (ValueError) carrying field and message
    - Accepted values are passed through untouched
    - RegistrantSummary exposes only the public projection (id, first_name, email)

Design Decisions:
    - model_validator(mode="before") over per-field validators: pydantic would
      report every failing field, the API reports only the first one
    - Unknown keys ignored (landing page form may send extras)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from cadastro.core.validation import check_registration


class RuleViolation(ValueError):
    """A registration rule failure that remembers which field broke it."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class RegistrationRequest(BaseModel):
    """Registration payload — validated by the ordered registration rules."""
    model_config = ConfigDict(extra="ignore")

    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    password: str

    @model_validator(mode="before")
    @classmethod
    def apply_registration_rules(cls, data: Any) -> Any:
        violation = check_registration(data)
        if violation:
            raise RuleViolation(violation["field"], violation["message"])
        return data


class RegistrantSummary(BaseModel):
    """Lookup projection — never includes phone or password."""
    id: int
    first_name: str
    email: str


class MessageResponse(BaseModel):
    message: str
