"""Root conftest — shared test configuration and payload factory."""

import os

import pytest

# Never touch the on-disk cadastros.db from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def valid_payload():
    """The reference registration from the end-to-end scenario."""
    return {
        "first_name": "Alice",
        "last_name": "Johnson",
        "email": "alice@teste.com",
        "phone": "1122334455",
        "password": "Password@123",
    }
