"""
===============================================================================
USE CASE: Create User
===============================================================================

Business Goal:
    Dar de alta un usuario con un password inicial generado por el sistema.
    El password en claro se devuelve UNA sola vez; solo se persiste su hash.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateUserUseCase

Responsibilities:
    - Normalizar email (trim + lower).
    - Verificar unicidad de email (CONFLICT).
    - Generar password (CredentialGenerator) y hashearlo (PasswordHasher).
    - Persistir con status Active.
    - Convertir carreras de unicidad (DuplicateEmailError) en CONFLICT.

Collaborators:
    - UserRepository
    - PasswordHasher / CredentialGenerator (domain.services)
    - crosscutting.metrics.record_user_event

-------------------------------------------------------------------------------
BUSINESS RULES
-------------------------------------------------------------------------------
R1) El email es único (chequeo previo + constraint uq_users_email).
R2) Un usuario nace Active.
R3) Nunca se persiste ni se loguea el password en claro.
===============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ....crosscutting.exceptions import DuplicateEmailError
from ....crosscutting.metrics import record_user_event
from ....domain.entities import UserStatus, normalize_email
from ....domain.repositories import UserRepository
from ....domain.services import CredentialGenerator, PasswordHasher
from .user_results import (
    CreateUserResult,
    UserError,
    UserErrorCode,
    email_conflict_error,
)

logger = logging.getLogger(__name__)


@dataclass
class CreateUserInput:
    """
    DTO de entrada del alta.

    Nota:
      - Las validaciones de formato (longitudes, email, phone) viven en la
        capa HTTP (schemas/users.py); acá solo se aplican reglas de negocio.
    """

    name: str
    surname: str
    email: str
    phone: str | None = None


class CreateUserUseCase:
    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasher,
        credential_generator: CredentialGenerator,
    ) -> None:
        self._users = repository
        self._hasher = password_hasher
        self._generator = credential_generator

    def execute(self, input_data: CreateUserInput) -> CreateUserResult:
        name = (input_data.name or "").strip()
        surname = (input_data.surname or "").strip()
        email = normalize_email(input_data.email)

        # R: formato validado por UserReq (router y scripts/create_user.py).
        if not name or not surname or not email:
            return CreateUserResult(
                error=UserError(
                    code=UserErrorCode.VALIDATION_ERROR,
                    message="name, surname and email are required",
                )
            )

        if self._users.get_user_by_email(email) is not None:
            return CreateUserResult(error=email_conflict_error(email))

        password = self._generator.generate()

        try:
            user = self._users.create_user(
                name=name,
                surname=surname,
                email=email,
                phone=input_data.phone,
                password_hash=self._hasher.hash(password),
                status=UserStatus.ACTIVE,
            )
        except DuplicateEmailError:
            # Carrera: otro request insertó el mismo email entre el check y el insert.
            return CreateUserResult(error=email_conflict_error(email))

        logger.info("user created", extra={"user_id": user.id})
        record_user_event("created")

        return CreateUserResult(user=user, generated_password=password)
