"""Pytest configuration and fixtures for storefront tests."""

import os
import tempfile

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="storefront-logs-"))
os.environ.setdefault("API_URL", "http://testserver")

from unittest.mock import AsyncMock, MagicMock

import pytest

from storefront.schemas.auth import Session


@pytest.fixture
def session():
    """Session returned by a successful provider call."""
    return Session(access_token="token-123", email="ada@example.com", role="user", name="Ada")


@pytest.fixture
def provider(session):
    """Auth provider whose calls succeed by default."""
    mock_provider = MagicMock()
    mock_provider.login = AsyncMock(return_value=session)
    mock_provider.register = AsyncMock(return_value=session)
    return mock_provider


@pytest.fixture
def navigator():
    return MagicMock()


@pytest.fixture
def notifications():
    return MagicMock()


@pytest.fixture
def login_form():
    return {"email": "  ada@example.com ", "password": "secret-pw"}


@pytest.fixture
def register_form():
    return {
        "name": " Ada Lovelace ",
        "email": "ada@example.com",
        "password": "secret-pw",
        "confirmPassword": "secret-pw",
    }
