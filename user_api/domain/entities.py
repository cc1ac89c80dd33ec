"""
===============================================================================
TARJETA CRC - domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (User, UserStatus, UserPage)

Responsabilidades:
    - Definir el registro de usuario (sin infraestructura).
    - Centralizar las reglas de transición de estado (suspend/deactivate/activate).
    - Mantener tipos claros para casos de uso y repositorios.

Colaboradores:
    - domain.repositories: persisten/recuperan estas entidades.
    - application/usecases/users: consultan las reglas de transición.
    - interfaces/api: serializan DTOs basados en estas entidades.

Principios:
    - Sin dependencias a DB/FastAPI.
    - El hash de password vive en la entidad pero nunca sale por HTTP.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


def _utcnow() -> datetime:
    """Fecha/hora UTC (helper interno)."""
    return datetime.now(timezone.utc)


def normalize_email(email: str) -> str:
    """Forma canónica del email (la que se persiste y se compara)."""
    return (email or "").strip().lower()


class UserStatus(str, Enum):
    """Estado del ciclo de vida de un usuario."""

    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    DEACTIVATED = "Deactivated"


class InvalidStatusTransition(ValueError):
    """Transición de estado no permitida (se traduce a CONFLICT en application)."""


# R: destino -> estados de origen permitidos.
_ALLOWED_FROM: dict[UserStatus, frozenset[UserStatus]] = {
    UserStatus.SUSPENDED: frozenset({UserStatus.ACTIVE}),
    UserStatus.DEACTIVATED: frozenset({UserStatus.ACTIVE, UserStatus.SUSPENDED}),
    UserStatus.ACTIVE: frozenset({UserStatus.SUSPENDED, UserStatus.DEACTIVATED}),
}


def allowed_sources(target: UserStatus) -> frozenset[UserStatus]:
    """Estados desde los que se puede pasar a `target` (condición del UPDATE)."""
    return _ALLOWED_FROM[target]


_ALREADY_IN = {
    UserStatus.SUSPENDED: "already suspended",
    UserStatus.DEACTIVATED: "already deactivated",
    UserStatus.ACTIVE: "already active",
}


@dataclass
class User:
    """
    Usuario del sistema.

    Importante:
      - id lo asigna el storage (entero positivo, inmutable).
      - email se guarda normalizado (trim + lower).
      - Nunca se borra: el ciclo de vida se expresa con status.
    """

    id: int
    name: str
    surname: str
    email: str
    password_hash: str
    phone: Optional[str] = None
    status: UserStatus = UserStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def can_transition_to(self, target: UserStatus) -> bool:
        return self.status in _ALLOWED_FROM[target]

    def transition_error(self, target: UserStatus) -> str | None:
        """
        Devuelve el motivo por el que la transición es inválida (o None).

        Nota:
          - El texto es estable: lo consumen los mensajes de CONFLICT.
        """
        if self.can_transition_to(target):
            return None
        if self.status == target:
            return f"User with ID: {self.id} is {_ALREADY_IN[target]}"
        if target == UserStatus.SUSPENDED and self.status == UserStatus.DEACTIVATED:
            return "Cannot suspend a deactivated user"
        return f"Cannot change status from {self.status.value} to {target.value}"

    def _transition(self, target: UserStatus, *, at: datetime | None) -> None:
        reason = self.transition_error(target)
        if reason is not None:
            raise InvalidStatusTransition(reason)
        self.status = target
        self.updated_at = at or _utcnow()

    def suspend(self, *, at: datetime | None = None) -> None:
        """Active -> Suspended."""
        self._transition(UserStatus.SUSPENDED, at=at)

    def deactivate(self, *, at: datetime | None = None) -> None:
        """Active|Suspended -> Deactivated."""
        self._transition(UserStatus.DEACTIVATED, at=at)

    def activate(self, *, at: datetime | None = None) -> None:
        """Suspended|Deactivated -> Active."""
        self._transition(UserStatus.ACTIVE, at=at)


@dataclass
class UserPage:
    """Página de usuarios + total (para listados paginados)."""

    users: List[User] = field(default_factory=list)
    total: int = 0
