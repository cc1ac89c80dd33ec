"""
===============================================================================
TARJETA CRC - infrastructure/services/password_hasher.py
===============================================================================

Clase:
    Argon2PasswordHasher

Responsabilidades:
    - Hashear passwords con Argon2 (argon2-cffi).
    - Verificar password vs hash almacenado sin propagar errores de la librería.

Colaboradores:
    - argon2.PasswordHasher
    - domain.services.PasswordHasher (contrato)
===============================================================================
"""

from __future__ import annotations

from argon2 import PasswordHasher as _Argon2
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


class Argon2PasswordHasher:
    """Adapter de argon2-cffi al puerto PasswordHasher."""

    def __init__(self, hasher: _Argon2 | None = None) -> None:
        self._hasher = hasher or _Argon2()

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False
