"""
===============================================================================
USE CASE: Get User
===============================================================================

Responsibilities:
    - Obtener un usuario por ID.
    - NOT_FOUND si no existe.
===============================================================================
"""

from __future__ import annotations

from ....domain.repositories import UserRepository
from .user_results import UserResult, not_found_error


class GetUserUseCase:
    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, user_id: int) -> UserResult:
        user = self._users.get_user_by_id(user_id)
        if user is None:
            return UserResult(error=not_found_error(user_id))
        return UserResult(user=user)
