"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure the test environment (APP_ENV=test, no .env loading)
  - Provide user fixtures, a fresh in-memory repository and fast credential
    collaborators

Notes:
  - APP_ENV is set before importing user_api: the logger reads Settings at import
  - Argon2 runs with minimal cost parameters to keep the suite fast
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("APP_ENV", "test")

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from argon2 import PasswordHasher as Argon2  # noqa: E402

from user_api.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from user_api.domain.entities import User, UserStatus  # noqa: E402
from user_api.infrastructure.repositories.in_memory import (  # noqa: E402
    InMemoryUserRepository,
)
from user_api.infrastructure.services import (  # noqa: E402
    Argon2PasswordHasher,
    SecretsCredentialGenerator,
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (require PostgreSQL)"
    )


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


def make_user(
    user_id: int = 1,
    *,
    email: str = "ada@example.com",
    status: UserStatus = UserStatus.ACTIVE,
    password_hash: str = "hash",
) -> User:
    return User(
        id=user_id,
        name="Ada",
        surname="Lovelace",
        email=email,
        phone=None,
        password_hash=password_hash,
        status=status,
    )


@pytest.fixture
def sample_user() -> User:
    """R: Active user with a dummy hash."""
    return make_user()


# ============================================================================
# Collaborators
# ============================================================================


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """R: Fresh repository per test (no shared state with the container)."""
    return InMemoryUserRepository()


@pytest.fixture
def password_hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(Argon2(time_cost=1, memory_cost=8, parallelism=1))


@pytest.fixture
def credential_generator() -> SecretsCredentialGenerator:
    return SecretsCredentialGenerator(length=12)
