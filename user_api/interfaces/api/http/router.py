"""
===============================================================================
TARJETA CRC - router.py (Router raíz / Composición)
===============================================================================
Responsabilidades:
  - Definir el APIRouter raíz que se incluye en FastAPI (app.include_router).
  - Centralizar responses RFC7807 para OpenAPI.
  - Componer routers por bounded context (users).

Colaboradores:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.users

Notas:
  - Este router se incluye desde user_api/api/main.py con prefix="/v1".
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers.users import router as users_router


def build_router() -> APIRouter:
    """
    Construye el router raíz v1.

    Motivo:
      - Facilita tests (se puede invocar build_router() y verificar rutas).
      - Reduce efectos colaterales al importar módulos.
    """
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)
    api_router.include_router(users_router)
    return api_router


router = build_router()

__all__ = ["router", "build_router"]
