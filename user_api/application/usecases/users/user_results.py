"""
===============================================================================
USER USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Business Goal:
    Proveer modelos compartidos de resultados y errores para los casos de uso
    de Users, con un contrato estable para:
      - validaciones
      - recursos no encontrados
      - conflictos de negocio (email duplicado, transición de estado inválida)

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de lanzar excepciones
      hacia afuera: el router los mapea a status codes (error_mapping.py).

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    user_results models (module)

Responsibilities:
    - Definir UserErrorCode (VALIDATION_ERROR, NOT_FOUND, CONFLICT).
    - Representar UserError (code + message).
    - Representar resultados:
        * UserResult (single user)
        * UserListResult (página + total)
        * CreateUserResult (user + password generado, visible una sola vez)

Collaborators:
    - domain.entities.User / UserPage
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....domain.entities import User, UserPage


class UserErrorCode(str, Enum):
    """
    Códigos de error para casos de uso de Users.

      - VALIDATION_ERROR: inputs inválidos o password actual incorrecto.
      - NOT_FOUND: usuario inexistente.
      - CONFLICT: email duplicado o transición de estado no permitida.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class UserError:
    """Error de caso de uso (sin stack traces ni metadata de infraestructura)."""

    code: UserErrorCode
    message: str


@dataclass
class UserResult:
    """
    Contrato:
      - Si error is None => user presente (éxito)
      - Si error != None => user None (fallo)
    """

    user: User | None = None
    error: UserError | None = None


@dataclass
class UserListResult:
    """Página de usuarios + parámetros efectivos de paginación."""

    page: UserPage | None = None
    page_number: int = 1
    limit: int = 0
    error: UserError | None = None


@dataclass
class CreateUserResult:
    """
    Resultado del alta.

    Nota:
      - generated_password es el único momento en que el password existe en
        claro. No se persiste ni se loguea.
    """

    user: User | None = None
    generated_password: str | None = None
    error: UserError | None = None


def not_found_error(user_id: int) -> UserError:
    return UserError(
        code=UserErrorCode.NOT_FOUND,
        message=f"User with ID: {user_id} not found",
    )


def email_conflict_error(email: str) -> UserError:
    return UserError(
        code=UserErrorCode.CONFLICT,
        message=f"A user with email '{email}' already exists",
    )
