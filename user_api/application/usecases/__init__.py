"""
Use Cases Layer (Business Operations)

Structure
---------
usecases/
└── users/      # User lifecycle: list, get, create, status, profile, password

Usage
-----
    from user_api.application.usecases import CreateUserUseCase
"""

from .users import (
    ActivateUserUseCase,
    CreateUserInput,
    CreateUserResult,
    CreateUserUseCase,
    DeactivateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    SuspendUserUseCase,
    UpdatePasswordInput,
    UpdatePasswordUseCase,
    UpdateUserInput,
    UpdateUserUseCase,
    UserError,
    UserErrorCode,
    UserListResult,
    UserResult,
)

__all__ = [
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "CreateUserInput",
    "CreateUserResult",
    "SuspendUserUseCase",
    "DeactivateUserUseCase",
    "ActivateUserUseCase",
    "UpdateUserUseCase",
    "UpdateUserInput",
    "UpdatePasswordUseCase",
    "UpdatePasswordInput",
    "UserResult",
    "UserListResult",
    "UserError",
    "UserErrorCode",
]
