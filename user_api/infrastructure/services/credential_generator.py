"""
===============================================================================
TARJETA CRC - infrastructure/services/credential_generator.py
===============================================================================

Clase:
    SecretsCredentialGenerator

Responsabilidades:
    - Generar passwords iniciales con un CSPRNG (módulo secrets).
    - Garantizar al menos una mayúscula, minúscula, dígito y símbolo, para que
      el password generado cumpla la misma regla que PasswordUpdateReq.

Colaboradores:
    - application/usecases/users/create_user.py
    - crosscutting.config (generated_password_length)
===============================================================================
"""

from __future__ import annotations

import secrets
import string

SYMBOLS = "!@#$%^&*()-_=+[]{}?"

_CLASSES = (string.ascii_uppercase, string.ascii_lowercase, string.digits, SYMBOLS)
_ALPHABET = "".join(_CLASSES)

MIN_LENGTH = 8


class SecretsCredentialGenerator:
    def __init__(self, length: int = 12) -> None:
        if length < MIN_LENGTH:
            raise ValueError(f"length must be >= {MIN_LENGTH}")
        self._length = length

    def generate(self) -> str:
        # R: un carácter de cada clase + relleno, luego shuffle con SystemRandom.
        chars = [secrets.choice(c) for c in _CLASSES]
        chars += [
            secrets.choice(_ALPHABET) for _ in range(self._length - len(chars))
        ]
        secrets.SystemRandom().shuffle(chars)
        return "".join(chars)
