"""
============================================================
TARJETA CRC
============================================================
Class: user_api.infrastructure.repositories (Package exports)

Responsibilities:
- Exponer implementaciones concretas de UserRepository (Postgres e InMemory)
  en un único punto de importación.

Collaborators:
- Repositorio Postgres (SQL crudo)
- Repositorio InMemory (testing / APP_ENV=test)
============================================================
"""

from .in_memory import InMemoryUserRepository
from .postgres import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "InMemoryUserRepository",
]
