"""
PostgreSQL Repository Implementations.

Raw parameterized SQL over psycopg_pool.
"""

from .user import PostgresUserRepository

__all__ = ["PostgresUserRepository"]
