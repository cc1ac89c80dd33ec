"""
============================================================
TARJETA CRC (Class / Responsibilities / Collaborators)
============================================================
Class: 001_users (Alembic Migration)

Responsibilities:
  - Crear la tabla `users` (migración fundacional).
  - Definir constraints que el repositorio asume:
      pk_users, uq_users_email, ck_users_status.

Collaborators:
  - PostgreSQL 14+
  - infrastructure/repositories/postgres/user.py (usa este esquema como contrato)

Policy:
  - Convención de nombres:
      pk_<tabla>        - Primary keys
      uq_<tabla>_<col>  - Unique constraints
      ck_<tabla>_<col>  - Check constraints
      ix_<tabla>_<col>  - Indexes
  - Evoluciones futuras con migraciones aditivas (002+).
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_users"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        # Identity: ids positivos asignados por la DB.
        sa.Column("id", sa.BigInteger, sa.Identity(start=1), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("surname", sa.String(50), nullable=False),
        # Email normalizado (lower/trim) por la capa de aplicación.
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("phone", sa.String(16), nullable=True),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'Active'"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint(
            "status IN ('Active', 'Suspended', 'Deactivated')",
            name="ck_users_status",
        ),
    )

    op.create_index("ix_users_status", "users", ["status"])


def downgrade() -> None:
    op.drop_index("ix_users_status", table_name="users")
    op.drop_table("users")
