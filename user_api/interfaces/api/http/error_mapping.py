"""
===============================================================================
TARJETA CRC - error_mapping.py (UserError -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir códigos de error de casos de uso a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.
  - Mantener el dominio libre de HTTP.

Reglas:
  - VALIDATION_ERROR -> 422, NOT_FOUND -> 404, CONFLICT -> 409.
  - Código desconocido -> 500 (no debería ocurrir).

Colaboradores:
  - application.usecases.users (UserError, UserErrorCode)
  - crosscutting.error_responses
===============================================================================
"""

from __future__ import annotations

from typing import NoReturn

from user_api.application.usecases import UserError, UserErrorCode
from user_api.crosscutting.error_responses import (
    conflict,
    internal_error,
    not_found,
    validation_error,
)


def raise_user_error(error: UserError, *, user_id: int | None = None) -> NoReturn:
    """
    Traduce UserError -> HTTP.

    Nota:
      - user_id se usa para NOT_FOUND consistente ("User '7' not found").
    """
    if error.code == UserErrorCode.VALIDATION_ERROR:
        raise validation_error(error.message)
    if error.code == UserErrorCode.NOT_FOUND:
        raise not_found("User", str(user_id if user_id is not None else "-"))
    if error.code == UserErrorCode.CONFLICT:
        raise conflict(error.message)

    raise internal_error(error.message)
