"""
===============================================================================
USE CASE: Suspend User
===============================================================================

Rules:
    - Active -> Suspended.
    - Suspended: CONFLICT (already suspended).
    - Deactivated: CONFLICT (cannot suspend a deactivated user).
===============================================================================
"""

from __future__ import annotations

from ....domain.entities import User
from .user_status import ChangeUserStatusUseCase


class SuspendUserUseCase(ChangeUserStatusUseCase):
    event = "suspended"

    @staticmethod
    def _apply(user: User) -> None:
        user.suspend()
