"""
===============================================================================
TARJETA CRC - validation.py (Errores de validación -> mensajes traducidos)
===============================================================================

Responsabilidades:
  - Negociar el locale del request (Accept-Language -> Settings.default_locale).
  - Convertir errores de pydantic/FastAPI en items {"field", "msg", "type"}.
  - Usar el catálogo crosscutting.i18n; si la regla no existe, usar el
    mensaje de pydantic.

Colaboradores:
  - crosscutting.i18n (translate, negotiate_locale)
  - api/exception_handlers.py (handler de RequestValidationError)
===============================================================================
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from fastapi import Request

from user_api.crosscutting.config import get_settings
from user_api.crosscutting.i18n import negotiate_locale, translate

# R: prefijos de loc que FastAPI agrega según el origen del parámetro.
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}

# R: reglas que describen al body completo (no a un campo).
_BODY_LEVEL_RULES = {"json_invalid", "model_attributes_type", "dict_type"}


def request_locale(request: Request) -> str:
    return negotiate_locale(
        request.headers.get("accept-language"),
        default=get_settings().default_locale,
    )


def field_name(loc: Iterable[Any]) -> str:
    """("body", "address", 0, "zip") -> "address.0.zip"; ("body",) -> "body"."""
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def translate_errors(
    errors: Iterable[Mapping[str, Any]], locale: str
) -> list[dict[str, str]]:
    items: list[dict[str, str]] = []
    for err in errors:
        rule = str(err.get("type", "value_error"))
        field = (
            "body" if rule in _BODY_LEVEL_RULES else field_name(err.get("loc", ()))
        )
        params = {"field": field, **(err.get("ctx") or {})}
        msg = translate(rule, locale, params) or str(err.get("msg", rule))
        items.append({"field": field, "msg": msg, "type": rule})
    return items
