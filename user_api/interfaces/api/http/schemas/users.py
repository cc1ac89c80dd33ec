"""
===============================================================================
TARJETA CRC - schemas/users.py
===============================================================================

Módulo:
    Schemas HTTP para Users

Responsabilidades:
    - Definir DTOs de request/response para endpoints de usuarios.
    - Validar formato (longitudes, email, teléfono, password fuerte).
    - Emitir errores con tipos estables (email_format, phone_format,
      strong_password, password_mismatch) que validation.py traduce.
    - Nunca exponer password_hash.

Colaboradores:
    - domain.entities.UserStatus
    - email_validator (formato de email)
===============================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, StringConstraints, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from user_api.domain.entities import UserStatus

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128

_PHONE_RE = re.compile(r"^\+?[0-9]{7,15}$")
_PHONE_SEPARATORS = re.compile(r"[\s-]+")

NameStr = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    ),
]


def _is_strong_password(value: str) -> bool:
    return (
        any(c.isupper() for c in value)
        and any(c.islower() for c in value)
        and any(c.isdigit() for c in value)
        and any(not c.isalnum() and not c.isspace() for c in value)
    )


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class UserReq(BaseModel):
    """Payload de alta y de actualización (PUT reemplaza el perfil completo)."""

    name: NameStr
    surname: NameStr
    email: str = Field(..., max_length=254, description="Email (se normaliza a lower)")
    phone: str | None = Field(
        default=None, description="7-15 dígitos, opcional +; se ignoran espacios/guiones"
    )

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        try:
            validate_email(v.strip(), check_deliverability=False)
        except EmailNotValidError as exc:
            raise PydanticCustomError(
                "email_format", "value is not a valid email address: {reason}",
                {"reason": str(exc)},
            ) from exc
        return v.strip().lower()

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str | None) -> str | None:
        if v is None:
            return None
        cleaned = _PHONE_SEPARATORS.sub("", v)
        if not cleaned:
            return None
        if not _PHONE_RE.match(cleaned):
            raise PydanticCustomError("phone_format", "value is not a valid phone number")
        return cleaned


class PasswordUpdateReq(BaseModel):
    """Cambio de password (requiere el actual)."""

    old_password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LENGTH)
    new_password: str = Field(
        ..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    confirm_password: str = Field(..., max_length=PASSWORD_MAX_LENGTH)

    @field_validator("new_password")
    @classmethod
    def validate_strength(cls, v: str) -> str:
        if not _is_strong_password(v):
            raise PydanticCustomError(
                "strong_password",
                "password must contain upper-case, lower-case, digit and symbol",
            )
        return v

    @field_validator("confirm_password")
    @classmethod
    def validate_confirmation(cls, v: str, info: ValidationInfo) -> str:
        # R: si new_password ya falló, no está en info.data (evita doble error).
        new_password = info.data.get("new_password")
        if new_password is not None and v != new_password:
            raise PydanticCustomError(
                "password_mismatch", "confirmation does not match new_password"
            )
        return v


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class UserRes(BaseModel):
    id: int
    name: str
    surname: str
    email: str
    phone: str | None = None
    status: UserStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UsersListRes(BaseModel):
    total: int
    page: int
    limit: int
    users: list[UserRes]


class CreateUserRes(BaseModel):
    """id + password generado (se muestra una única vez)."""

    id: int
    password: str


class MessageRes(BaseModel):
    message: str
