"""
============================================================
TARJETA CRC - infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Almacenar usuarios en memoria (tests / APP_ENV=test / local dev).
  - Replicar el contrato de PostgresUserRepository:
      - ids autoincrementales desde 1
      - orden id ASC
      - unique(email) -> DuplicateEmailError
      - updated_at en cada mutación

Collaborators:
  - domain.entities.User, UserStatus
  - domain.repositories.UserRepository (contrato a implementar)

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - Se devuelven copias: nunca se entrega la instancia interna a los callers.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from itertools import count
from threading import Lock
from typing import Dict, Iterable, List, Optional

from ....crosscutting.exceptions import DuplicateEmailError
from ....domain.entities import User, UserStatus
from ....domain.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    """
    Repositorio in-memory, thread-safe, para Users.

    Modelo mental:
    - _users es la "tabla" en memoria (id -> User).
    - _ids emula la secuencia SERIAL de Postgres.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[int, User] = {}
        self._ids = count(1)

    @staticmethod
    def _now() -> datetime:
        """R: Fuente única de tiempo (UTC) para consistencia en tests."""
        return datetime.now(timezone.utc)

    def _email_taken(self, email: str, *, exclude_id: int | None = None) -> bool:
        # R: llamar con lock tomado.
        return any(
            u.email == email and u.id != exclude_id for u in self._users.values()
        )

    # =========================================================
    # Lectura
    # =========================================================
    def list_users(self, *, limit: int, offset: int = 0) -> List[User]:
        if limit <= 0:
            return []
        offset = max(offset, 0)
        with self._lock:
            ordered = [self._users[k] for k in sorted(self._users)]
        return [replace(u) for u in ordered[offset : offset + limit]]

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
        return replace(user) if user else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return replace(user)
        return None

    # =========================================================
    # Escritura
    # =========================================================
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
        with self._lock:
            if self._email_taken(email):
                raise DuplicateEmailError(email)
            user = User(
                id=next(self._ids),
                name=name,
                surname=surname,
                email=email,
                phone=phone,
                password_hash=password_hash,
                status=status,
                created_at=self._now(),
            )
            self._users[user.id] = user
            return replace(user)

    def _update(
        self,
        user_id: int,
        *,
        from_statuses: frozenset[UserStatus] | None = None,
        **changes,
    ) -> Optional[User]:
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return None
            if from_statuses is not None and current.status not in from_statuses:
                return None
            email = changes.get("email")
            if email is not None and self._email_taken(email, exclude_id=user_id):
                raise DuplicateEmailError(email)
            updated = replace(current, updated_at=self._now(), **changes)
            self._users[user_id] = updated
            return replace(updated)

    def update_user_status(
        self,
        user_id: int,
        status: UserStatus,
        *,
        from_statuses: Iterable[UserStatus] | None = None,
    ) -> Optional[User]:
        # R: el chequeo de estado y la escritura ocurren bajo el mismo lock.
        return self._update(
            user_id,
            from_statuses=None if from_statuses is None else frozenset(from_statuses),
            status=status,
        )

    def update_user_profile(
        self,
        user_id: int,
        *,
        name: str,
        surname: str,
        email: str,
        phone: str | None,
    ) -> Optional[User]:
        return self._update(
            user_id, name=name, surname=surname, email=email, phone=phone
        )

    def update_user_password(
        self, user_id: int, password_hash: str
    ) -> Optional[User]:
        return self._update(user_id, password_hash=password_hash)

    def ping(self) -> bool:
        return True
