"""
===============================================================================
USER USE CASES PACKAGE (Public API / Exports)
===============================================================================

Responsibilities:
    - Re-exportar los casos de uso de Users, sus inputs y resultados.
    - Definir __all__ como contrato de API pública del paquete.
===============================================================================
"""

from __future__ import annotations

# -----------------------------------------------------------------------------
# Use Cases
# -----------------------------------------------------------------------------
from .activate_user import ActivateUserUseCase
from .create_user import CreateUserInput, CreateUserUseCase
from .deactivate_user import DeactivateUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .suspend_user import SuspendUserUseCase
from .update_password import UpdatePasswordInput, UpdatePasswordUseCase
from .update_user import UpdateUserInput, UpdateUserUseCase
from .user_status import ChangeUserStatusUseCase

# -----------------------------------------------------------------------------
# DTOs / Result models
# -----------------------------------------------------------------------------
from .user_results import (
    CreateUserResult,
    UserError,
    UserErrorCode,
    UserListResult,
    UserResult,
)

__all__ = [
    # Use cases
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "SuspendUserUseCase",
    "DeactivateUserUseCase",
    "ActivateUserUseCase",
    "ChangeUserStatusUseCase",
    "UpdateUserUseCase",
    "UpdatePasswordUseCase",
    # Inputs
    "CreateUserInput",
    "UpdateUserInput",
    "UpdatePasswordInput",
    # Results
    "UserResult",
    "UserListResult",
    "CreateUserResult",
    "UserError",
    "UserErrorCode",
]
