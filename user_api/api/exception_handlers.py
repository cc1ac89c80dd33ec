"""
===============================================================================
TARJETA CRC - user_api/api/exception_handlers.py (Manejo Centralizado de Excepciones)
===============================================================================

Responsabilidades:
  - Traducir excepciones de la aplicación a respuestas HTTP RFC7807.
  - Traducir errores de validación de request (i18n en/es).
  - Centralizar logging de errores con request_id + error_id.
  - Evitar filtrar detalles internos en errores no controlados.

Colaboradores:
  - crosscutting.error_responses: AppHTTPException, ErrorCode, app_exception_handler
  - crosscutting.exceptions: UserApiError y derivadas
  - interfaces.api.http.validation: request_locale, translate_errors
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    validation_error,
)
from ..crosscutting.exceptions import DatabaseError, UserApiError
from ..crosscutting.i18n import translate
from ..crosscutting.logger import logger
from ..interfaces.api.http.validation import request_locale, translate_errors


async def _handle_service_error(
    request: Request,
    *,
    exc: UserApiError,
    code: ErrorCode,
    status_code: int,
    detail: str,
) -> JSONResponse:
    """Helper común para errores tipados de servicios."""
    logger.error(
        "Error de servicio",
        extra={
            "code": code.value,
            "error_id": exc.error_id,
            "error": exc.message,
        },
    )

    app_exc = AppHTTPException(
        status_code=status_code,
        code=code,
        detail=detail,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    locale = request_locale(request)
    errors = translate_errors(exc.errors(), locale)

    logger.info(
        "Request inválido",
        extra={"locale": locale, "fields": [e["field"] for e in errors]},
    )

    detail = translate("request_invalid", locale) or "Request validation failed"
    return await app_exception_handler(request, validation_error(detail, errors))


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    # R: el mensaje de DatabaseError incluye el error del driver; no sale al cliente.
    return await _handle_service_error(
        request,
        exc=exc,
        code=ErrorCode.DATABASE_ERROR,
        status_code=503,
        detail="Database operation failed",
    )


async def user_api_error_handler(request: Request, exc: UserApiError) -> JSONResponse:
    # R: Errores base: tratamos como INTERNAL_ERROR por defecto.
    settings = get_settings()
    return await _handle_service_error(
        request,
        exc=exc,
        code=ErrorCode.INTERNAL_ERROR,
        status_code=500,
        detail=exc.message if not settings.is_production() else "Internal error",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler para excepciones no tipadas.

    - Log completo (stacktrace).
    - Respuesta genérica en producción.
    """
    settings = get_settings()

    logger.error("Excepción no controlada", exc_info=True, extra={"error": str(exc)})

    detail = str(exc) if not settings.is_production() else "Internal error"
    return await app_exception_handler(
        request,
        AppHTTPException(status_code=500, code=ErrorCode.INTERNAL_ERROR, detail=detail),
    )


def register_exception_handlers(app) -> None:
    """
    Registra handlers en la app FastAPI.

    Importante:
      - Las subclases se registran antes que UserApiError.
      - Exception genérica se registra al final como fallback.
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(UserApiError, user_api_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
