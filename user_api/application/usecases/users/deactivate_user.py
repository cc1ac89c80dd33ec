"""
===============================================================================
USE CASE: Deactivate User
===============================================================================

Rules:
    - Active | Suspended -> Deactivated.
    - Deactivated: CONFLICT (already deactivated).
===============================================================================
"""

from __future__ import annotations

from ....domain.entities import User
from .user_status import ChangeUserStatusUseCase


class DeactivateUserUseCase(ChangeUserStatusUseCase):
    event = "deactivated"

    @staticmethod
    def _apply(user: User) -> None:
        user.deactivate()
