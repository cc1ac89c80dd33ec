"""
===============================================================================
USE CASE: Update User (perfil completo)
===============================================================================

CRC CARD
-------------------------------------------------------------------------------
Class:
    UpdateUserUseCase

Responsibilities:
    - Validar existencia (NOT_FOUND).
    - Si el email cambia, validar que no pertenezca a otro usuario (CONFLICT).
    - Reemplazar name/surname/email/phone (el status NO se toca acá).

Collaborators:
    - UserRepository.get_user_by_id / get_user_by_email / update_user_profile
===============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ....crosscutting.exceptions import DuplicateEmailError
from ....crosscutting.metrics import record_user_event
from ....domain.entities import normalize_email
from ....domain.repositories import UserRepository
from .user_results import UserResult, email_conflict_error, not_found_error

logger = logging.getLogger(__name__)


@dataclass
class UpdateUserInput:
    user_id: int
    name: str
    surname: str
    email: str
    phone: str | None = None


class UpdateUserUseCase:
    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, input_data: UpdateUserInput) -> UserResult:
        user_id = input_data.user_id
        email = normalize_email(input_data.email)

        current = self._users.get_user_by_id(user_id)
        if current is None:
            return UserResult(error=not_found_error(user_id))

        if email != current.email:
            owner = self._users.get_user_by_email(email)
            if owner is not None and owner.id != user_id:
                return UserResult(error=email_conflict_error(email))

        try:
            updated = self._users.update_user_profile(
                user_id,
                name=input_data.name.strip(),
                surname=input_data.surname.strip(),
                email=email,
                phone=input_data.phone,
            )
        except DuplicateEmailError:
            return UserResult(error=email_conflict_error(email))

        if updated is None:
            return UserResult(error=not_found_error(user_id))

        logger.info("user updated", extra={"user_id": user_id})
        record_user_event("updated")
        return UserResult(user=updated)
