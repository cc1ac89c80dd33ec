"""
===============================================================================
USER STATUS TRANSITIONS (shared logic)
===============================================================================

CRC CARD
-------------------------------------------------------------------------------
Class:
    ChangeUserStatusUseCase (base)

Responsibilities:
    - Cargar el usuario (NOT_FOUND).
    - Aplicar la transición sobre la entidad (CONFLICT si no aplica).
    - Persistir el nuevo status y registrar el evento.

Collaborators:
    - domain.entities.User (suspend/deactivate/activate)
    - UserRepository.get_user_by_id / update_user_status (compare-and-set)
    - crosscutting.metrics.record_user_event

Notes:
    - Suspend/Deactivate/Activate solo definen _apply() y event.
===============================================================================
"""

from __future__ import annotations

import logging
from typing import ClassVar

from ....crosscutting.metrics import record_user_event
from ....domain.entities import (
    InvalidStatusTransition,
    User,
    UserStatus,
    allowed_sources,
)
from ....domain.repositories import UserRepository
from .user_results import UserError, UserErrorCode, UserResult, not_found_error

logger = logging.getLogger(__name__)


class ChangeUserStatusUseCase:
    event: ClassVar[str]

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, user_id: int) -> UserResult:
        user = self._users.get_user_by_id(user_id)
        if user is None:
            return UserResult(error=not_found_error(user_id))

        try:
            self._apply(user)
        except InvalidStatusTransition as exc:
            return UserResult(
                error=UserError(code=UserErrorCode.CONFLICT, message=str(exc))
            )

        target = user.status
        updated = self._users.update_user_status(
            user_id, target, from_statuses=allowed_sources(target)
        )
        if updated is None:
            return self._lost_race(user_id, target)

        logger.info(f"user {self.event}", extra={"user_id": user_id})
        record_user_event(self.event)
        return UserResult(user=updated)

    def _lost_race(self, user_id: int, target: UserStatus) -> UserResult:
        """
        El UPDATE condicional no afectó filas: el usuario desapareció (NOT_FOUND)
        o un request concurrente cambió su status (CONFLICT).
        """
        current = self._users.get_user_by_id(user_id)
        if current is None:
            return UserResult(error=not_found_error(user_id))

        reason = current.transition_error(target) or (
            f"User with ID: {user_id} status changed concurrently"
        )
        logger.warning(
            "status change lost a race",
            extra={"user_id": user_id, "status": current.status.value},
        )
        return UserResult(
            error=UserError(code=UserErrorCode.CONFLICT, message=reason)
        )

    @staticmethod
    def _apply(user: User) -> None:
        raise NotImplementedError
