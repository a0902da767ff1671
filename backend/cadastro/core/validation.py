"""Registration Rules — ordered field predicates, first failure wins.

Invariants:
    - check_registration is PURE: returns a violation descriptor or None, never raises
    - REGISTRATION_RULES order is the evaluation order (first_name, last_name,
      email, phone, password) — exactly one violation is reported
    - Values pass through untouched: no stripping, no case folding
    - A non-dict payload is evaluated as an empty dict (fails first_name required)

Design Decisions:
    - Rules as data (field, predicate, message) over if/elif chains: each rule is
      testable on its own and new rules are one list entry
    - PASSWORD_POLICY folded into one rule: clients get one policy message,
      not a hint about which clause failed
"""

import re
from dataclasses import dataclass
from typing import Any, Callable


NAME_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ ]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[0-9]+$")

PASSWORD_MIN_LENGTH: int = 8
PASSWORD_SYMBOLS: str = "!@#$&*"

PASSWORD_POLICY_MESSAGE = (
    f"password must be at least {PASSWORD_MIN_LENGTH} characters long and "
    f"include an uppercase letter, a digit and one of {PASSWORD_SYMBOLS}"
)

PASSWORD_POLICY: list[Callable[[str], bool]] = [
    lambda v: len(v) >= PASSWORD_MIN_LENGTH,
    lambda v: any(c.isascii() and c.isupper() for c in v),
    lambda v: any(c in "0123456789" for c in v),
    lambda v: any(c in PASSWORD_SYMBOLS for c in v),
]


@dataclass(frozen=True)
class Rule:
    """One field rule. predicate receives the raw field value (may be None)."""
    field: str
    predicate: Callable[[Any], bool]
    message: str


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _matches(pattern: re.Pattern) -> Callable[[Any], bool]:
    return lambda v: isinstance(v, str) and pattern.fullmatch(v) is not None


def _is_valid_phone(value: Any) -> bool:
    if value is None or value == "":
        return True
    return _matches(PHONE_PATTERN)(value)


def _satisfies_password_policy(value: Any) -> bool:
    return isinstance(value, str) and all(check(value) for check in PASSWORD_POLICY)


def _name_rules(field: str) -> list[Rule]:
    return [
        Rule(field, _is_present, f"{field} is required"),
        Rule(
            field, _matches(NAME_PATTERN),
            f"{field} must contain only letters and spaces",
        ),
    ]


REGISTRATION_RULES: list[Rule] = [
    *_name_rules("first_name"),
    *_name_rules("last_name"),
    Rule("email", _is_present, "email is required"),
    Rule("email", _matches(EMAIL_PATTERN), "email must be a valid email address"),
    Rule("phone", _is_valid_phone, "phone must contain only digits"),
    Rule("password", _is_present, "password is required"),
    Rule("password", _satisfies_password_policy, PASSWORD_POLICY_MESSAGE),
]


def check_registration(
    payload: Any, rules: list[Rule] = REGISTRATION_RULES,
) -> dict | None:
    """Return {"field", "message"} for the first violated rule, or None."""
    data = payload if isinstance(payload, dict) else {}
    for rule in rules:
        if not rule.predicate(data.get(rule.field)):
            return {"field": rule.field, "message": rule.message}
    return None
