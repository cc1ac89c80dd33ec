"""
Name: PostgresUserRepository Integration Tests

Responsibilities:
  - Exercise the repository against a migrated PostgreSQL database
  - Verify constraints (uq_users_email, ck_users_status) and updated_at
"""

import pytest
from psycopg import errors as pg_errors

from user_api.crosscutting.exceptions import DuplicateEmailError
from user_api.domain.entities import UserStatus
from user_api.infrastructure.repositories.postgres import PostgresUserRepository

pytestmark = pytest.mark.integration


@pytest.fixture
def repo(db_pool, clean_users):
    return PostgresUserRepository(pool=db_pool)


def _create(repo, email="ada@example.com"):
    return repo.create_user(
        name="Ada",
        surname="Lovelace",
        email=email,
        phone="+5491155550000",
        password_hash="$argon2id$fake",
    )


def test_create_and_read_back(repo):
    user = _create(repo)

    fetched = repo.get_user_by_id(user.id)
    assert fetched == user
    assert fetched.status == UserStatus.ACTIVE
    assert fetched.created_at is not None
    assert fetched.updated_at is None
    assert repo.get_user_by_email("ada@example.com").id == user.id


def test_ids_are_sequential_and_listing_is_ordered(repo):
    ids = [_create(repo, f"u{i}@example.com").id for i in range(3)]

    page = repo.list_users(limit=2, offset=1)

    assert ids == sorted(ids)
    assert [u.id for u in page] == ids[1:]
    assert repo.count_users() == 3


def test_duplicate_email_raises(repo):
    _create(repo)

    with pytest.raises(DuplicateEmailError):
        _create(repo)


def test_updates_set_updated_at(repo):
    user = _create(repo)

    suspended = repo.update_user_status(user.id, UserStatus.SUSPENDED)
    renamed = repo.update_user_profile(
        user.id, name="Augusta", surname="King", email="augusta@example.com", phone=None
    )
    rehashed = repo.update_user_password(user.id, "$argon2id$other")

    assert suspended.status == UserStatus.SUSPENDED
    assert suspended.updated_at is not None
    assert renamed.email == "augusta@example.com"
    assert renamed.status == UserStatus.SUSPENDED
    assert rehashed.password_hash == "$argon2id$other"


def test_missing_user_updates_return_none(repo):
    assert repo.get_user_by_id(999) is None
    assert repo.update_user_status(999, UserStatus.ACTIVE) is None


def test_status_check_constraint(db_pool, clean_users):
    with pytest.raises(pg_errors.CheckViolation):
        with db_pool.connection() as conn:
            conn.execute(
                "INSERT INTO users (name, surname, email, password_hash, status) "
                "VALUES ('A', 'B', 'c@example.com', 'h', 'Banned')"
            )


def test_ping(repo):
    assert repo.ping() is True
