"""
===============================================================================
TARJETA CRC - domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.
    - Evitar imports profundos y acoplamientos innecesarios.

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import (
    InvalidStatusTransition,
    User,
    UserPage,
    UserStatus,
    allowed_sources,
    normalize_email,
)
from .repositories import UserRepository
from .services import CredentialGenerator, PasswordHasher

__all__ = [
    # Entities
    "User",
    "UserStatus",
    "UserPage",
    "InvalidStatusTransition",
    "normalize_email",
    "allowed_sources",
    # Repository Interfaces (Ports)
    "UserRepository",
    # Service Interfaces (Ports)
    "PasswordHasher",
    "CredentialGenerator",
]
