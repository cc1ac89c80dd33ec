"""
===============================================================================
TARJETA CRC - user_api/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorio, hasher, generador) siguiendo DIP.
  - Exponer factories para FastAPI (Depends) y para scripts/.
  - Mantener singletons con caching (lru_cache).
  - Elegir in-memory vs Postgres según Settings.app_env.

Colaboradores:
  - crosscutting.config.get_settings
  - domain.repositories / domain.services (puertos)
  - infrastructure.* (implementaciones)
  - application.usecases.users (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO depende de FastAPI (solo expone factories).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    ActivateUserUseCase,
    CreateUserUseCase,
    DeactivateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    SuspendUserUseCase,
    UpdatePasswordUseCase,
    UpdateUserUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import UserRepository
from .domain.services import CredentialGenerator, PasswordHasher
from .infrastructure.repositories import (
    InMemoryUserRepository,
    PostgresUserRepository,
)
from .infrastructure.services import Argon2PasswordHasher, SecretsCredentialGenerator

# =============================================================================
# Singletons
# =============================================================================


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    """Repositorio de usuarios (in-memory en test; Postgres en runtime)."""
    if get_settings().is_test_env():
        return InMemoryUserRepository()
    return PostgresUserRepository()


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    return Argon2PasswordHasher()


@lru_cache(maxsize=1)
def get_credential_generator() -> CredentialGenerator:
    return SecretsCredentialGenerator(
        length=get_settings().generated_password_length
    )


# =============================================================================
# Casos de uso (factories, sin cache: son livianos)
# =============================================================================


def get_list_users_use_case() -> ListUsersUseCase:
    """Caso de uso: listar usuarios paginados."""
    return ListUsersUseCase(get_user_repository())


def get_get_user_use_case() -> GetUserUseCase:
    """Caso de uso: obtener usuario."""
    return GetUserUseCase(get_user_repository())


def get_create_user_use_case() -> CreateUserUseCase:
    """Caso de uso: alta de usuario con password generado."""
    return CreateUserUseCase(
        repository=get_user_repository(),
        password_hasher=get_password_hasher(),
        credential_generator=get_credential_generator(),
    )


def get_suspend_user_use_case() -> SuspendUserUseCase:
    return SuspendUserUseCase(get_user_repository())


def get_deactivate_user_use_case() -> DeactivateUserUseCase:
    return DeactivateUserUseCase(get_user_repository())


def get_activate_user_use_case() -> ActivateUserUseCase:
    return ActivateUserUseCase(get_user_repository())


def get_update_user_use_case() -> UpdateUserUseCase:
    """Caso de uso: reemplazar perfil."""
    return UpdateUserUseCase(get_user_repository())


def get_update_password_use_case() -> UpdatePasswordUseCase:
    """Caso de uso: cambio de password."""
    return UpdatePasswordUseCase(
        repository=get_user_repository(),
        password_hasher=get_password_hasher(),
    )


def reset_container() -> None:
    """Limpia los singletons (tests / cambio de Settings)."""
    get_user_repository.cache_clear()
    get_password_hasher.cache_clear()
    get_credential_generator.cache_clear()
