"""
CRC - domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define the persistence contract for users (port).
- Keep application/domain independent from infrastructure (PostgreSQL, in-memory).
- Enable dependency inversion and straightforward unit testing (fake repositories).

Collaborators
- domain.entities: User, UserStatus
- infrastructure.repositories: postgres/in_memory implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- Implementations MUST match method signatures exactly.
- Unique-email violations surface as DuplicateEmailError (crosscutting.exceptions).
"""

from typing import Iterable, List, Optional, Protocol

from .entities import User, UserStatus


class UserRepository(Protocol):
    """
    R: Interface for user persistence.

    Implementations must provide:
      - Stable listing (id ASC) with limit/offset
      - Lookups by id and by normalized email
      - Status/profile/password updates that bump updated_at
      - No hard deletes
    """

    def list_users(self, *, limit: int, offset: int = 0) -> List[User]:
        """
        R: List users ordered by id ASC.

        Implementations MUST:
            - Return [] if limit <= 0
            - Treat a negative offset as 0
        """
        ...

    def count_users(self) -> int:
        """R: Total number of users."""
        ...

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """R: Fetch a user by ID (None when missing)."""
        ...

    def get_user_by_email(self, email: str) -> Optional[User]:
        """R: Fetch a user by normalized email (uniqueness check)."""
        ...

    def create_user(
        self,
        *,
        name: str,
        surname: str,
        email: str,
        phone: str | None,
        password_hash: str,
        status: UserStatus = UserStatus.ACTIVE,
    ) -> User:
        """R: Persist a new user. Raises DuplicateEmailError on collision."""
        ...

    def update_user_status(
        self,
        user_id: int,
        status: UserStatus,
        *,
        from_statuses: Iterable[UserStatus] | None = None,
    ) -> Optional[User]:
        """
        R: Set status.

        Returns None when the user is missing or, if from_statuses is given,
        when the stored status is not one of them (compare-and-set).
        """
        ...

    def update_user_profile(
        self,
        user_id: int,
        *,
        name: str,
        surname: str,
        email: str,
        phone: str | None,
    ) -> Optional[User]:
        """R: Replace profile fields. Raises DuplicateEmailError on collision."""
        ...

    def update_user_password(
        self, user_id: int, password_hash: str
    ) -> Optional[User]:
        """R: Store a new password hash (None when missing)."""
        ...

    def ping(self) -> bool:
        """R: Check repository connectivity/availability."""
        ...
