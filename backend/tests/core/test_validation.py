"""Registration Rules — tests for pure, ordered, first-failure-wins validation.

Tests cover:
    - valid payloads pass (with and without phone)
    - each required field reports its own message
    - rule order decides which single message is returned
    - name, email, phone and password formats
    - non-dict payloads fail the first required rule
"""

import pytest

from cadastro.core.validation import (
    PASSWORD_POLICY_MESSAGE,
    REGISTRATION_RULES,
    Rule,
    check_registration,
)


# ─── valid payloads ──────────────────────────────────────────────

def test_valid_payload_passes(valid_payload):
    assert check_registration(valid_payload) is None


@pytest.mark.parametrize("phone", [None, ""])
def test_phone_is_optional(valid_payload, phone):
    valid_payload["phone"] = phone
    assert check_registration(valid_payload) is None


def test_absent_phone_passes(valid_payload):
    del valid_payload["phone"]
    assert check_registration(valid_payload) is None


def test_accented_names_with_spaces_pass(valid_payload):
    valid_payload["first_name"] = "José María"
    valid_payload["last_name"] = "Conceição da Silva"
    assert check_registration(valid_payload) is None


def test_check_does_not_mutate_payload(valid_payload):
    snapshot = dict(valid_payload)
    check_registration(valid_payload)
    assert valid_payload == snapshot


# ─── required fields ─────────────────────────────────────────────

@pytest.mark.parametrize("field", ["first_name", "last_name", "email", "password"])
def test_missing_required_field(valid_payload, field):
    del valid_payload[field]
    result = check_registration(valid_payload)
    assert result == {"field": field, "message": f"{field} is required"}


@pytest.mark.parametrize("field", ["first_name", "last_name", "email", "password"])
def test_blank_required_field(valid_payload, field):
    valid_payload[field] = "   "
    result = check_registration(valid_payload)
    assert result["field"] == field
    assert result["message"] == f"{field} is required"


def test_empty_payload_reports_first_name_only():
    result = check_registration({})
    assert result == {"field": "first_name", "message": "first_name is required"}


@pytest.mark.parametrize("payload", [None, [], "alice", 42])
def test_non_object_payload_fails_first_required_rule(payload):
    result = check_registration(payload)
    assert result["field"] == "first_name"


# ─── ordering ────────────────────────────────────────────────────

def test_first_failure_wins(valid_payload):
    valid_payload["last_name"] = "J0hnson"
    valid_payload["email"] = "not-an-email"
    valid_payload["password"] = "weak"
    assert check_registration(valid_payload)["field"] == "last_name"


def test_rule_order_follows_fields():
    fields = [rule.field for rule in REGISTRATION_RULES]
    assert fields == [
        "first_name", "first_name",
        "last_name", "last_name",
        "email", "email",
        "phone",
        "password", "password",
    ]


def test_custom_rule_list():
    rules = [Rule("nickname", lambda v: v == "ok", "nickname must be ok")]
    assert check_registration({"nickname": "no"}, rules) == {
        "field": "nickname", "message": "nickname must be ok",
    }
    assert check_registration({"nickname": "ok"}, rules) is None


# ─── names ───────────────────────────────────────────────────────

@pytest.mark.parametrize("name", ["Alice2", "Ana-Maria", "O'Neil", "Bob_", "Zoë!"])
def test_name_rejects_non_letters(valid_payload, name):
    valid_payload["first_name"] = name
    result = check_registration(valid_payload)
    assert result == {
        "field": "first_name",
        "message": "first_name must contain only letters and spaces",
    }


def test_name_must_be_string(valid_payload):
    valid_payload["last_name"] = 123
    assert check_registration(valid_payload)["message"] == (
        "last_name must contain only letters and spaces"
    )


# ─── email ───────────────────────────────────────────────────────

@pytest.mark.parametrize("email", [
    "alice.teste.com",
    "alice@testecom",
    "alice@",
    "@teste.com",
    "alice @teste.com",
    "alice@teste .com",
    "alice@@teste.com",
])
def test_invalid_email(valid_payload, email):
    valid_payload["email"] = email
    assert check_registration(valid_payload) == {
        "field": "email", "message": "email must be a valid email address",
    }


@pytest.mark.parametrize("email", ["a@b.co", "first.last+tag@mail.example.org"])
def test_valid_email(valid_payload, email):
    valid_payload["email"] = email
    assert check_registration(valid_payload) is None


# ─── phone ───────────────────────────────────────────────────────

@pytest.mark.parametrize("phone", ["11 2233-4455", "+5511", "abc", 1122334455])
def test_phone_rejects_non_digits(valid_payload, phone):
    valid_payload["phone"] = phone
    assert check_registration(valid_payload) == {
        "field": "phone", "message": "phone must contain only digits",
    }


# ─── password ────────────────────────────────────────────────────

@pytest.mark.parametrize("password", [
    "weak",
    "Pass@12",          # 7 chars
    "password@123",     # no uppercase
    "Password@abc",     # no digit
    "Password123",      # no symbol
    "Password%123",     # symbol outside !@#$&*
])
def test_password_policy_violations(valid_payload, password):
    valid_payload["password"] = password
    assert check_registration(valid_payload) == {
        "field": "password", "message": PASSWORD_POLICY_MESSAGE,
    }


@pytest.mark.parametrize("password", ["Abcdefg1!", "Z9&zzzzz", "12345678A#"])
def test_password_policy_accepts(valid_payload, password):
    valid_payload["password"] = password
    assert check_registration(valid_payload) is None
