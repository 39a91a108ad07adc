"""Shared test fixtures.

Tests run against the in-memory repositories; MongoDB repositories are
exercised with motor collections replaced by AsyncMock.
"""

from __future__ import annotations

from typing import Generator

import pytest
from passlib.context import CryptContext

from infrastructure.balance.in_memory_balance_repository import InMemoryBalanceRepository
from infrastructure.config import SessionSettings
from infrastructure.preset.in_memory_preset_repository import InMemoryPresetRepository
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.user.password_verifier import PasswordVerifier
from infrastructure.user.repository_factory import reset_user_repositories

TEST_JWT_SECRET = "test-secret-with-at-least-thirty-two-bytes"

_ENV_VARS = [
    "USER_REPOSITORY",
    "MONGODB_URI",
    "MONGODB_DATABASE",
    "CHECK_BALANCE",
    "START_BALANCE",
    "SESSION_EXPIRY",
    "JWT_SECRET",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove account-related env vars so .env values never leak into tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_user_repositories()
    yield
    reset_user_repositories()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def balance_repository() -> InMemoryBalanceRepository:
    return InMemoryBalanceRepository()


@pytest.fixture
def preset_repository() -> InMemoryPresetRepository:
    return InMemoryPresetRepository()


@pytest.fixture
def password_verifier() -> PasswordVerifier:
    """Verifier with minimum bcrypt cost to keep tests fast."""
    return PasswordVerifier(CryptContext(schemes=["bcrypt"], bcrypt__rounds=4))


@pytest.fixture
def session_settings() -> SessionSettings:
    return SessionSettings(jwt_secret=TEST_JWT_SECRET)
