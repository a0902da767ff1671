"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RegistrantId wraps the integer surrogate key — positive, assigned by storage
    - PUBLIC_PROJECTION is the single source of truth for lookup result fields

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Projection as a tuple of column names: shared by the store query and
      the response schema tests
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RegistrantId = NewType("RegistrantId", int)

# Signed 64-bit INTEGER column: larger ids cannot exist and cannot be bound
MAX_REGISTRANT_ID: int = 2**63 - 1


# ─── Projections ─────────────────────────────────────────────────

# Lookup results never include phone or password
PUBLIC_PROJECTION: tuple[str, ...] = ("id", "first_name", "email")
