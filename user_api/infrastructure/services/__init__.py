"""
Infrastructure Services (Facade)

Adapters concretos de los puertos de domain.services:
  - Argon2PasswordHasher: hashing/verificación (argon2-cffi)
  - SecretsCredentialGenerator: passwords iniciales (secrets)
"""

from .credential_generator import SecretsCredentialGenerator  # noqa: F401
from .password_hasher import Argon2PasswordHasher  # noqa: F401

__all__ = ["Argon2PasswordHasher", "SecretsCredentialGenerator"]
