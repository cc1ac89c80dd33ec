"""
===============================================================================
TARJETA CRC - domain/services.py
===============================================================================

Módulo:
    Puertos de Servicios Externos (Protocols)

Responsabilidades:
    - Definir contratos para hashing de passwords y generación de credenciales.
    - Proteger a application de detalles de la librería concreta.

Colaboradores:
    - infrastructure/services/*: implementaciones concretas (argon2, secrets).
    - application/usecases/users: consumen estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
===============================================================================
"""

from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """Contrato para derivar y verificar hashes de password."""

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, password_hash: str) -> bool:
        """False si no coincide o si el hash es inválido (nunca lanza)."""
        ...


class CredentialGenerator(Protocol):
    """Contrato para generar passwords iniciales."""

    def generate(self) -> str: ...
