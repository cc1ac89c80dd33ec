# user_api/crosscutting/i18n.py
"""
===============================================================================
MÓDULO: Catálogo de mensajes de validación (en / es)
===============================================================================

Objetivo
--------
Traducir errores de validación (pydantic / reglas propias) a mensajes humanos
en el idioma del cliente, con una clave estable por regla.

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  MESSAGES + translate() + negotiate_locale()

Responsabilidades:
  - Mantener el catálogo de mensajes por locale y por regla
  - Resolver el locale a partir de Accept-Language (con q-values)
  - Interpolar parámetros de la regla (min_length, max_length, ge, le, ...)

Colaboradores:
  - interfaces/api/http/validation.py (traduce errores de request)
  - crosscutting/config.py (default_locale)
===============================================================================
"""

from __future__ import annotations

from typing import Any, Mapping

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "request_invalid": "Request validation failed",
        "missing": "{field} is required",
        "string_type": "{field} must be a string",
        "string_too_short": "{field} must be at least {min_length} characters long",
        "string_too_long": "{field} must be at most {max_length} characters long",
        "int_parsing": "{field} must be a valid integer",
        "int_type": "{field} must be a valid integer",
        "greater_than_equal": "{field} must be greater than or equal to {ge}",
        "less_than_equal": "{field} must be less than or equal to {le}",
        "email_format": "{field} must be a valid email address",
        "phone_format": "{field} must contain 7 to 15 digits, optionally prefixed by +",
        "strong_password": (
            "{field} must contain an upper-case letter, a lower-case letter, "
            "a digit and a symbol"
        ),
        "password_mismatch": "{field} must match new_password",
        "json_invalid": "request body is not valid JSON",
        "model_attributes_type": "request body must be a JSON object",
        "dict_type": "request body must be a JSON object",
        "extra_forbidden": "{field} is not an accepted field",
    },
    "es": {
        "request_invalid": "La validación del request falló",
        "missing": "{field} es obligatorio",
        "string_type": "{field} debe ser un texto",
        "string_too_short": "{field} debe tener al menos {min_length} caracteres",
        "string_too_long": "{field} debe tener como máximo {max_length} caracteres",
        "int_parsing": "{field} debe ser un número entero válido",
        "int_type": "{field} debe ser un número entero válido",
        "greater_than_equal": "{field} debe ser mayor o igual a {ge}",
        "less_than_equal": "{field} debe ser menor o igual a {le}",
        "email_format": "{field} debe ser una dirección de email válida",
        "phone_format": "{field} debe tener entre 7 y 15 dígitos, opcionalmente con prefijo +",
        "strong_password": (
            "{field} debe contener una mayúscula, una minúscula, "
            "un dígito y un símbolo"
        ),
        "password_mismatch": "{field} debe coincidir con new_password",
        "json_invalid": "el body del request no es JSON válido",
        "model_attributes_type": "el body del request debe ser un objeto JSON",
        "dict_type": "el body del request debe ser un objeto JSON",
        "extra_forbidden": "{field} no es un campo aceptado",
    },
}

SUPPORTED_LOCALES: frozenset[str] = frozenset(MESSAGES)


class _SafeParams(dict):
    """Deja el placeholder intacto si falta un parámetro (no rompe el mensaje)."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def translate(
    rule: str, locale: str, params: Mapping[str, Any] | None = None
) -> str | None:
    """
    Devuelve el mensaje traducido para `rule` o None si la regla no está catalogada.

    - Locale desconocido => DEFAULT_LOCALE.
    """
    catalog = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    template = catalog.get(rule)
    if template is None:
        return None
    return template.format_map(_SafeParams(params or {}))


def negotiate_locale(accept_language: str | None, default: str = DEFAULT_LOCALE) -> str:
    """
    Elige el mejor locale soportado según Accept-Language.

    Ej: "es-AR,es;q=0.9,en;q=0.8" -> "es"
    """
    if not accept_language:
        return default

    candidates: list[tuple[float, int, str]] = []
    for position, part in enumerate(accept_language.split(",")):
        piece = part.strip()
        if not piece:
            continue
        tag, _, params = piece.partition(";")
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        primary = tag.strip().split("-", 1)[0].lower()
        if primary in SUPPORTED_LOCALES and quality > 0:
            # R: posición negativa => a igual q, gana el primero declarado.
            candidates.append((quality, -position, primary))

    if not candidates:
        return default
    return max(candidates)[2]
