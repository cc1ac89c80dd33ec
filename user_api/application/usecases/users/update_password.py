"""
===============================================================================
USE CASE: Update Password
===============================================================================

Business Goal:
    Cambiar el password de un usuario verificando el password actual.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    UpdatePasswordUseCase

Responsibilities:
    - Validar existencia (NOT_FOUND).
    - Verificar confirmación == nuevo password.
    - Verificar old_password contra el hash almacenado.
    - Rechazar nuevo password igual al actual.
    - Persistir el nuevo hash.

Collaborators:
    - UserRepository.get_user_by_id / update_user_password
    - PasswordHasher (hash / verify)

-------------------------------------------------------------------------------
BUSINESS RULES
-------------------------------------------------------------------------------
R1) Todos los rechazos de credenciales son VALIDATION_ERROR (no 401: no hay auth).
R2) Los passwords jamás se loguean.
===============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ....crosscutting.metrics import record_user_event
from ....domain.repositories import UserRepository
from ....domain.services import PasswordHasher
from .user_results import UserError, UserErrorCode, UserResult, not_found_error

logger = logging.getLogger(__name__)


@dataclass
class UpdatePasswordInput:
    user_id: int
    old_password: str = field(repr=False)
    new_password: str = field(repr=False)
    confirm_password: str = field(repr=False)


class UpdatePasswordUseCase:
    def __init__(
        self, repository: UserRepository, password_hasher: PasswordHasher
    ) -> None:
        self._users = repository
        self._hasher = password_hasher

    def execute(self, input_data: UpdatePasswordInput) -> UserResult:
        user_id = input_data.user_id

        user = self._users.get_user_by_id(user_id)
        if user is None:
            return UserResult(error=not_found_error(user_id))

        if input_data.new_password != input_data.confirm_password:
            return self._invalid("New password and confirmation do not match")

        if not self._hasher.verify(input_data.old_password, user.password_hash):
            return self._invalid("Old password is incorrect")

        if input_data.new_password == input_data.old_password:
            return self._invalid("New password must be different from the old one")

        updated = self._users.update_user_password(
            user_id, self._hasher.hash(input_data.new_password)
        )
        if updated is None:
            return UserResult(error=not_found_error(user_id))

        logger.info("user password changed", extra={"user_id": user_id})
        record_user_event("password_changed")
        return UserResult(user=updated)

    @staticmethod
    def _invalid(message: str) -> UserResult:
        return UserResult(
            error=UserError(code=UserErrorCode.VALIDATION_ERROR, message=message)
        )
