"""
============================================================
TARJETA CRC - infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - Listar, buscar, crear y actualizar usuarios en la tabla `users`.
  - Ejecutar SQL parametrizado (contrato con la migración 001_users).
  - Mapear filas crudas -> entidad de dominio `User` y validar `UserStatus`.
  - Traducir unique violation de email -> DuplicateEmailError.
  - Exponer el resto de fallos vía `DatabaseError` con logging estructurado.

Collaborators:
  - psycopg_pool.ConnectionPool (pool de conexiones)
  - infrastructure.db.pool.get_pool (pool global si no se inyecta uno)
  - domain.entities.User / UserStatus
  - crosscutting.exceptions.DatabaseError / DuplicateEmailError

Constraints / Notes:
  - Repositorio puro: NO define reglas de negocio (transiciones, unicidad previa).
  - Retorna None cuando no existe el recurso (no exception por "not found").
  - Orden estable en listados: id ASC.
  - Toda mutación actualiza updated_at = now().
============================================================
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from psycopg import errors as pg_errors
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError, DuplicateEmailError
from ....crosscutting.logger import logger
from ....domain.entities import User, UserStatus

# R: Lista explícita de columnas para mantener el contrato estable con migraciones.
_USER_COLUMNS = (
    "id, name, surname, email, phone, password_hash, status, created_at, updated_at"
)

_USER_ORDER_BY = "id ASC"


def _row_to_user(row: tuple) -> User:
    """
    Convierte una fila de `users` a entidad `User`.

    Status casting estricto: si el valor no matchea el enum -> DatabaseError.
    """
    try:
        status = UserStatus(row[6])
    except ValueError as exc:
        raise DatabaseError(f"Invalid user status in database: {row[6]}") from exc

    return User(
        id=row[0],
        name=row[1],
        surname=row[2],
        email=row[3],
        phone=row[4],
        password_hash=row[5],
        status=status,
        created_at=row[7],
        updated_at=row[8],
    )


class PostgresUserRepository:
    """Implementación PostgreSQL de UserRepository."""

    def __init__(self, pool: ConnectionPool | None = None) -> None:
        # Pool inyectable (para tests); si es None se usa el global.
        self._pool = pool

    # =========================================================
    # Helpers internos: pool + ejecución
    # =========================================================
    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool
        from ...db.pool import get_pool

        return get_pool()

    def _fetchone(
        self,
        *,
        query: str,
        params: Iterable[object],
        log_msg: str,
        log_extra: dict[str, object],
        email: str | None = None,
    ) -> tuple | None:
        """
        Ejecuta una query ... fetchone() con manejo consistente de errores.

        - Si se pasa email, una UniqueViolation se traduce a DuplicateEmailError.
        - Cualquier otro fallo -> logger.exception + DatabaseError.
        """
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except pg_errors.UniqueViolation as exc:
            if email is None:
                logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
                raise DatabaseError(f"{log_msg}: {exc}") from exc
            logger.warning(
                "PostgresUserRepository: email duplicado", extra=log_extra
            )
            raise DuplicateEmailError(email, original_error=exc) from exc
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}") from exc

    def _fetchall(
        self,
        *,
        query: str,
        params: Iterable[object] = (),
        log_msg: str,
        log_extra: dict[str, object],
    ) -> list[tuple]:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchall()
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}") from exc

    # =========================================================
    # Lectura
    # =========================================================
    def list_users(self, *, limit: int, offset: int = 0) -> List[User]:
        """
        Guard rails:
        - limit <= 0 => []
        - offset < 0 => 0
        """
        if limit <= 0:
            return []
        offset = max(offset, 0)

        rows = self._fetchall(
            query=f"""
                SELECT {_USER_COLUMNS}
                FROM users
                ORDER BY {_USER_ORDER_BY}
                LIMIT %s OFFSET %s
            """,
            params=(limit, offset),
            log_msg="PostgresUserRepository: list_users failed",
            log_extra={"limit": limit, "offset": offset},
        )
        return [_row_to_user(r) for r in rows]

    def count_users(self) -> int:
        row = self._fetchone(
            query="SELECT COUNT(*) FROM users",
            params=(),
            log_msg="PostgresUserRepository: count_users failed",
            log_extra={},
        )
        return int(row[0]) if row else 0

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        row = self._fetchone(
            query=f"""
                SELECT {_USER_COLUMNS}
                FROM users
                WHERE id = %s
            """,
            params=(user_id,),
            log_msg="PostgresUserRepository: get_user_by_id failed",
            log_extra={"user_id": user_id},
        )
        return _row_to_user(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        # R: el caller normaliza; la columna guarda el email ya normalizado.
        row = self._fetchone(
            query=f"""
                SELECT {_USER_COLUMNS}
                FROM users
                WHERE email = %s
            """,
            params=(email,),
            log_msg="PostgresUserRepository: get_user_by_email failed",
            log_extra={"email": email},
        )
        return _row_to_user(row) if row else None

    # =========================================================
    # Escritura
    # =========================================================
    def create_user(
        self,
        *,
        name: str,
        surname: str,
        email: str,
        phone: str | None,
        password_hash: str,
        status: UserStatus = UserStatus.ACTIVE,
    ) -> User:
        row = self._fetchone(
            query=f"""
                INSERT INTO users (name, surname, email, phone, password_hash, status)
                VALUES (%s, %s, %s, %s, %s, %s)
                RETURNING {_USER_COLUMNS}
            """,
            params=(name, surname, email, phone, password_hash, status.value),
            log_msg="PostgresUserRepository: create_user failed",
            log_extra={"email": email},
            email=email,
        )
        if not row:
            raise DatabaseError(
                "PostgresUserRepository: create_user failed (no row returned)"
            )
        return _row_to_user(row)

    def update_user_status(
        self,
        user_id: int,
        status: UserStatus,
        *,
        from_statuses: Iterable[UserStatus] | None = None,
    ) -> Optional[User]:
        """
        Compare-and-set cuando se pasa from_statuses: la fila solo se actualiza
        si su status actual está en ese conjunto (un request concurrente que ya
        cambió el status deja 0 filas afectadas).
        """
        params: tuple = (status.value, user_id)
        status_filter = ""
        if from_statuses is not None:
            status_filter = "AND status = ANY(%s)"
            params = (*params, sorted(s.value for s in from_statuses))

        row = self._fetchone(
            query=f"""
                UPDATE users
                SET status = %s, updated_at = now()
                WHERE id = %s {status_filter}
                RETURNING {_USER_COLUMNS}
            """,
            params=params,
            log_msg="PostgresUserRepository: update_user_status failed",
            log_extra={"user_id": user_id, "status": status.value},
        )
        return _row_to_user(row) if row else None

    def update_user_profile(
        self,
        user_id: int,
        *,
        name: str,
        surname: str,
        email: str,
        phone: str | None,
    ) -> Optional[User]:
        row = self._fetchone(
            query=f"""
                UPDATE users
                SET name = %s, surname = %s, email = %s, phone = %s,
                    updated_at = now()
                WHERE id = %s
                RETURNING {_USER_COLUMNS}
            """,
            params=(name, surname, email, phone, user_id),
            log_msg="PostgresUserRepository: update_user_profile failed",
            log_extra={"user_id": user_id, "email": email},
            email=email,
        )
        return _row_to_user(row) if row else None

    def update_user_password(
        self, user_id: int, password_hash: str
    ) -> Optional[User]:
        row = self._fetchone(
            query=f"""
                UPDATE users
                SET password_hash = %s, updated_at = now()
                WHERE id = %s
                RETURNING {_USER_COLUMNS}
            """,
            params=(password_hash, user_id),
            log_msg="PostgresUserRepository: update_user_password failed",
            log_extra={"user_id": user_id},
        )
        return _row_to_user(row) if row else None

    def ping(self) -> bool:
        try:
            with self._get_pool().connection() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except Exception as exc:
            logger.warning(
                "PostgresUserRepository: ping failed", extra={"error": str(exc)}
            )
            return False
