"""
===============================================================================
USE CASE: Activate User (reactivación)
===============================================================================

Rules:
    - Suspended | Deactivated -> Active.
    - Active: CONFLICT (already active).
===============================================================================
"""

from __future__ import annotations

from ....domain.entities import User
from .user_status import ChangeUserStatusUseCase


class ActivateUserUseCase(ChangeUserStatusUseCase):
    event = "activated"

    @staticmethod
    def _apply(user: User) -> None:
        user.activate()
