"""
===============================================================================
TARJETA CRC - user_api/interfaces/api/http/routers/__init__.py
===============================================================================

Responsibilities:
    - Re-exportar routers por bounded context para el router raíz.

Notas:
    - Este archivo NO define endpoints.
===============================================================================
"""

from .users import router as users_router

__all__ = ["users_router"]
