"""
Name: User Use Case Tests

Responsibilities:
  - Validate list/get/create/update/password use cases
  - Validate status transitions (suspend / deactivate / activate)
  - Validate race handling (DuplicateEmailError, user vanishing mid-operation)

Collaborators:
  - InMemoryUserRepository (real in-memory storage)
  - FakePasswordHasher / FakeCredentialGenerator (deterministic)
"""

import pytest

from user_api.application.usecases import (
    ActivateUserUseCase,
    CreateUserInput,
    CreateUserUseCase,
    DeactivateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    SuspendUserUseCase,
    UpdatePasswordInput,
    UpdatePasswordUseCase,
    UpdateUserInput,
    UpdateUserUseCase,
    UserErrorCode,
)
from user_api.crosscutting.exceptions import DuplicateEmailError
from user_api.domain.entities import UserStatus
from user_api.infrastructure.repositories.in_memory import InMemoryUserRepository

pytestmark = pytest.mark.unit


class FakePasswordHasher:
    def hash(self, password: str) -> str:
        return f"hashed::{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed::{password}"


class FakeCredentialGenerator:
    def __init__(self, password: str = "Gen3rated!pw") -> None:
        self.password = password
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        return self.password


class RacingCreateRepository(InMemoryUserRepository):
    """Simula otro request que inserta el mismo email entre check e insert."""

    def get_user_by_email(self, email):
        return None

    def create_user(self, **kwargs):
        raise DuplicateEmailError(kwargs["email"])


class VanishingUserRepository(InMemoryUserRepository):
    """El usuario desaparece entre el get y el update."""

    def update_user_status(self, user_id, status, *, from_statuses=None):
        with self._lock:
            self._users.pop(user_id, None)
        return None

    def update_user_password(self, user_id, password_hash):
        return None


class StaleReadRepository(InMemoryUserRepository):
    """Devuelve una sola vez un snapshot viejo (otro request escribió después)."""

    def __init__(self) -> None:
        super().__init__()
        self.stale = None

    def get_user_by_id(self, user_id):
        if self.stale is not None:
            snapshot, self.stale = self.stale, None
            return snapshot
        return super().get_user_by_id(user_id)


class RacingUpdateRepository(InMemoryUserRepository):
    """Otro request toma el email entre el chequeo y el UPDATE."""

    def update_user_profile(self, user_id, *, name, surname, email, phone):
        raise DuplicateEmailError(email)


def _seed(repo, email="ada@example.com", *, status=UserStatus.ACTIVE, password="Old!pass1"):
    return repo.create_user(
        name="Ada",
        surname="Lovelace",
        email=email,
        phone=None,
        password_hash=f"hashed::{password}",
        status=status,
    )


@pytest.fixture
def repo():
    return InMemoryUserRepository()


# =============================================================================
# List / Get
# =============================================================================


def test_list_users_paginates_and_reports_total(repo):
    for i in range(5):
        _seed(repo, f"user{i}@example.com")

    result = ListUsersUseCase(repo).execute(page=2, limit=2)

    assert result.error is None
    assert result.page_number == 2
    assert result.limit == 2
    assert result.page.total == 5
    assert [u.email for u in result.page.users] == [
        "user2@example.com",
        "user3@example.com",
    ]


def test_list_users_page_past_end_is_empty(repo):
    _seed(repo)

    result = ListUsersUseCase(repo).execute(page=3, limit=10)

    assert result.error is None
    assert result.page.users == []
    assert result.page.total == 1


@pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (-1, 5)])
def test_list_users_rejects_non_positive_params(repo, page, limit):
    result = ListUsersUseCase(repo).execute(page=page, limit=limit)

    assert result.page is None
    assert result.error.code == UserErrorCode.VALIDATION_ERROR


def test_get_user_returns_user(repo):
    user = _seed(repo)

    result = GetUserUseCase(repo).execute(user.id)

    assert result.error is None
    assert result.user.email == "ada@example.com"


def test_get_user_not_found(repo):
    result = GetUserUseCase(repo).execute(99)

    assert result.user is None
    assert result.error.code == UserErrorCode.NOT_FOUND
    assert result.error.message == "User with ID: 99 not found"


# =============================================================================
# Create
# =============================================================================


def test_create_user_generates_password_and_stores_hash(repo):
    generator = FakeCredentialGenerator()
    use_case = CreateUserUseCase(repo, FakePasswordHasher(), generator)

    result = use_case.execute(
        CreateUserInput(
            name=" Ada ", surname="Lovelace", email=" Ada@Example.com ", phone="+123456789"
        )
    )

    assert result.error is None
    assert result.generated_password == "Gen3rated!pw"
    assert generator.calls == 1
    stored = repo.get_user_by_id(result.user.id)
    assert stored.name == "Ada"
    assert stored.email == "ada@example.com"
    assert stored.status == UserStatus.ACTIVE
    assert stored.password_hash == "hashed::Gen3rated!pw"
    assert stored.phone == "+123456789"


def test_create_user_duplicate_email_is_conflict(repo):
    _seed(repo)
    generator = FakeCredentialGenerator()
    use_case = CreateUserUseCase(repo, FakePasswordHasher(), generator)

    result = use_case.execute(
        CreateUserInput(name="Other", surname="Person", email="ADA@example.com")
    )

    assert result.error.code == UserErrorCode.CONFLICT
    assert "ada@example.com" in result.error.message
    assert generator.calls == 0
    assert repo.count_users() == 1


def test_create_user_race_on_insert_is_conflict():
    use_case = CreateUserUseCase(
        RacingCreateRepository(), FakePasswordHasher(), FakeCredentialGenerator()
    )

    result = use_case.execute(
        CreateUserInput(name="Ada", surname="Lovelace", email="ada@example.com")
    )

    assert result.user is None
    assert result.generated_password is None
    assert result.error.code == UserErrorCode.CONFLICT


def test_create_user_blank_fields_are_rejected(repo):
    use_case = CreateUserUseCase(
        repo, FakePasswordHasher(), FakeCredentialGenerator()
    )

    result = use_case.execute(CreateUserInput(name="  ", surname="X", email="a@b.co"))

    assert result.error.code == UserErrorCode.VALIDATION_ERROR
    assert repo.count_users() == 0


# =============================================================================
# Status transitions
# =============================================================================


def test_suspend_active_user(repo):
    user = _seed(repo)

    result = SuspendUserUseCase(repo).execute(user.id)

    assert result.error is None
    assert repo.get_user_by_id(user.id).status == UserStatus.SUSPENDED
    assert repo.get_user_by_id(user.id).updated_at is not None


def test_suspend_twice_is_conflict(repo):
    user = _seed(repo, status=UserStatus.SUSPENDED)

    result = SuspendUserUseCase(repo).execute(user.id)

    assert result.error.code == UserErrorCode.CONFLICT
    assert result.error.message == f"User with ID: {user.id} is already suspended"


def test_suspend_deactivated_user_is_conflict(repo):
    user = _seed(repo, status=UserStatus.DEACTIVATED)

    result = SuspendUserUseCase(repo).execute(user.id)

    assert result.error.code == UserErrorCode.CONFLICT
    assert result.error.message == "Cannot suspend a deactivated user"
    assert repo.get_user_by_id(user.id).status == UserStatus.DEACTIVATED


@pytest.mark.parametrize("start", [UserStatus.ACTIVE, UserStatus.SUSPENDED])
def test_deactivate_from_active_or_suspended(repo, start):
    user = _seed(repo, status=start)

    result = DeactivateUserUseCase(repo).execute(user.id)

    assert result.error is None
    assert result.user.status == UserStatus.DEACTIVATED


def test_deactivate_twice_is_conflict(repo):
    user = _seed(repo, status=UserStatus.DEACTIVATED)

    result = DeactivateUserUseCase(repo).execute(user.id)

    assert result.error.code == UserErrorCode.CONFLICT


@pytest.mark.parametrize("start", [UserStatus.SUSPENDED, UserStatus.DEACTIVATED])
def test_activate_from_inactive_states(repo, start):
    user = _seed(repo, status=start)

    result = ActivateUserUseCase(repo).execute(user.id)

    assert result.error is None
    assert result.user.status == UserStatus.ACTIVE


def test_activate_active_user_is_conflict(repo):
    user = _seed(repo)

    result = ActivateUserUseCase(repo).execute(user.id)

    assert result.error.code == UserErrorCode.CONFLICT
    assert "already active" in result.error.message


@pytest.mark.parametrize(
    "use_case_cls", [SuspendUserUseCase, DeactivateUserUseCase, ActivateUserUseCase]
)
def test_status_change_unknown_user_is_not_found(repo, use_case_cls):
    result = use_case_cls(repo).execute(404)

    assert result.error.code == UserErrorCode.NOT_FOUND


def test_status_change_user_vanishes_before_update():
    repo = VanishingUserRepository()
    user = _seed(repo)

    result = SuspendUserUseCase(repo).execute(user.id)

    assert result.error.code == UserErrorCode.NOT_FOUND


def test_concurrent_deactivation_is_not_overwritten_by_suspend():
    repo = StaleReadRepository()
    user = _seed(repo)
    # R: snapshot leído por suspend antes de que deactivate escriba.
    repo_snapshot = repo.get_user_by_id(user.id)
    assert DeactivateUserUseCase(repo).execute(user.id).error is None
    repo.stale = repo_snapshot

    result = SuspendUserUseCase(repo).execute(user.id)

    assert result.error.code == UserErrorCode.CONFLICT
    assert result.error.message == "Cannot suspend a deactivated user"
    assert repo.get_user_by_id(user.id).status == UserStatus.DEACTIVATED


def test_concurrent_activation_makes_second_activate_a_conflict():
    repo = StaleReadRepository()
    user = _seed(repo, status=UserStatus.SUSPENDED)
    repo_snapshot = repo.get_user_by_id(user.id)
    assert ActivateUserUseCase(repo).execute(user.id).error is None
    repo.stale = repo_snapshot

    result = ActivateUserUseCase(repo).execute(user.id)

    assert result.error.code == UserErrorCode.CONFLICT
    assert result.error.message == f"User with ID: {user.id} is already active"


# =============================================================================
# Update profile
# =============================================================================


def _update_input(user_id, email="ada@example.com", **overrides):
    data = dict(
        user_id=user_id, name="Augusta", surname="King", email=email, phone=None
    )
    data.update(overrides)
    return UpdateUserInput(**data)


def test_update_user_replaces_profile_and_keeps_status(repo):
    user = _seed(repo, status=UserStatus.SUSPENDED)

    result = UpdateUserUseCase(repo).execute(
        _update_input(user.id, email="Augusta@Example.com", phone="5551234567")
    )

    assert result.error is None
    stored = repo.get_user_by_id(user.id)
    assert stored.name == "Augusta"
    assert stored.surname == "King"
    assert stored.email == "augusta@example.com"
    assert stored.phone == "5551234567"
    assert stored.status == UserStatus.SUSPENDED
    assert stored.password_hash == user.password_hash


def test_update_user_keeping_own_email_is_allowed(repo):
    user = _seed(repo)

    result = UpdateUserUseCase(repo).execute(_update_input(user.id))

    assert result.error is None


def test_update_user_email_owned_by_other_is_conflict(repo):
    user = _seed(repo)
    _seed(repo, "taken@example.com")

    result = UpdateUserUseCase(repo).execute(
        _update_input(user.id, email="taken@example.com")
    )

    assert result.error.code == UserErrorCode.CONFLICT
    assert repo.get_user_by_id(user.id).email == "ada@example.com"


def test_update_user_not_found(repo):
    result = UpdateUserUseCase(repo).execute(_update_input(12))

    assert result.error.code == UserErrorCode.NOT_FOUND


def test_update_user_race_on_update_is_conflict():
    repo = RacingUpdateRepository()
    user = _seed(repo)

    result = UpdateUserUseCase(repo).execute(
        _update_input(user.id, email="fresh@example.com")
    )

    assert result.user is None
    assert result.error.code == UserErrorCode.CONFLICT
    assert result.error.message == "A user with email 'fresh@example.com' already exists"
    assert repo.get_user_by_id(user.id).email == "ada@example.com"


# =============================================================================
# Update password
# =============================================================================


def _password_input(user_id, old="Old!pass1", new="New!pass2", confirm=None):
    return UpdatePasswordInput(
        user_id=user_id,
        old_password=old,
        new_password=new,
        confirm_password=new if confirm is None else confirm,
    )


def test_update_password_stores_new_hash(repo):
    user = _seed(repo)

    result = UpdatePasswordUseCase(repo, FakePasswordHasher()).execute(
        _password_input(user.id)
    )

    assert result.error is None
    assert repo.get_user_by_id(user.id).password_hash == "hashed::New!pass2"


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"confirm": "Other!pass3"}, "New password and confirmation do not match"),
        ({"old": "Wrong!pass9"}, "Old password is incorrect"),
        (
            {"new": "Old!pass1"},
            "New password must be different from the old one",
        ),
    ],
)
def test_update_password_rejections(repo, kwargs, message):
    user = _seed(repo)

    result = UpdatePasswordUseCase(repo, FakePasswordHasher()).execute(
        _password_input(user.id, **kwargs)
    )

    assert result.error.code == UserErrorCode.VALIDATION_ERROR
    assert result.error.message == message
    assert repo.get_user_by_id(user.id).password_hash == "hashed::Old!pass1"


def test_update_password_not_found(repo):
    result = UpdatePasswordUseCase(repo, FakePasswordHasher()).execute(
        _password_input(3)
    )

    assert result.error.code == UserErrorCode.NOT_FOUND


def test_update_password_user_vanishes_before_update():
    repo = VanishingUserRepository()
    user = _seed(repo)

    result = UpdatePasswordUseCase(repo, FakePasswordHasher()).execute(
        _password_input(user.id)
    )

    assert result.error.code == UserErrorCode.NOT_FOUND


def test_update_password_input_repr_hides_secrets():
    text = repr(_password_input(1))

    assert "Old!pass1" not in text
    assert "New!pass2" not in text
