"""
===============================================================================
USE CASE: List Users (paginado page/limit)
===============================================================================

CRC CARD
-------------------------------------------------------------------------------
Class:
    ListUsersUseCase

Responsibilities:
    - Validar page >= 1 y limit >= 1.
    - Traducir page/limit -> offset/limit.
    - Devolver la página + total de usuarios.

Collaborators:
    - UserRepository.list_users / count_users
    - user_results.UserListResult
===============================================================================
"""

from __future__ import annotations

from ....domain.entities import UserPage
from ....domain.repositories import UserRepository
from .user_results import UserError, UserErrorCode, UserListResult


class ListUsersUseCase:
    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, page: int = 1, limit: int = 10) -> UserListResult:
        if page < 1 or limit < 1:
            return UserListResult(
                page_number=page,
                limit=limit,
                error=UserError(
                    code=UserErrorCode.VALIDATION_ERROR,
                    message="page and limit must be positive integers",
                ),
            )

        offset = (page - 1) * limit
        users = self._users.list_users(limit=limit, offset=offset)
        total = self._users.count_users()

        return UserListResult(
            page=UserPage(users=users, total=total),
            page_number=page,
            limit=limit,
        )
