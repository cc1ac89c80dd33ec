"""
===============================================================================
TARJETA CRC - user_api/interfaces/api/http/routers/users.py
===============================================================================

Class/Module:
    Users Router

Responsibilities:
    - Exponer endpoints HTTP del ciclo de vida de usuarios.
    - Convertir requests HTTP -> inputs de casos de uso.
    - Traducir UserError -> RFC7807 (error_mapping).
    - Mapear entidades -> DTOs (sin password_hash).

Collaborators:
    - user_api.application.usecases (List/Get/Create/Suspend/Deactivate/
      Activate/Update/UpdatePassword)
    - user_api.container (factories DI)
    - schemas.users (DTOs Pydantic)

Patterns:
    - Controller / Router
    - Adapter (HTTP -> UseCase)
    - Error Mapping
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query
from fastapi.exceptions import RequestValidationError

from user_api.application.usecases import (
    ActivateUserUseCase,
    CreateUserInput,
    CreateUserUseCase,
    DeactivateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    SuspendUserUseCase,
    UpdatePasswordInput,
    UpdatePasswordUseCase,
    UpdateUserInput,
    UpdateUserUseCase,
)
from user_api.container import (
    get_activate_user_use_case,
    get_create_user_use_case,
    get_deactivate_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_suspend_user_use_case,
    get_update_password_use_case,
    get_update_user_use_case,
)
from user_api.crosscutting.config import get_settings
from user_api.crosscutting.error_responses import internal_error
from user_api.domain.entities import User

from ..error_mapping import raise_user_error
from ..schemas.users import (
    CreateUserRes,
    MessageRes,
    PasswordUpdateReq,
    UserReq,
    UserRes,
    UsersListRes,
)

router = APIRouter()

UserIdPath = Path(..., ge=1, description="ID del usuario")


# =============================================================================
# Helpers internos (puros / sin IO)
# =============================================================================


def _to_user_res(user: User) -> UserRes:
    return UserRes(
        id=user.id,
        name=user.name,
        surname=user.surname,
        email=user.email,
        phone=user.phone,
        status=user.status,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def _message(text: str) -> MessageRes:
    return MessageRes(message=text)


def _page_limit(limit: int | None) -> int:
    """
    Resuelve limit contra los Settings vigentes en cada request.

    Por encima del máximo se reporta igual que un `le` de Query (mismo
    handler, mismo mensaje traducido).
    """
    settings = get_settings()
    if limit is None:
        return settings.default_page_limit
    max_limit = settings.max_page_limit
    if limit > max_limit:
        raise RequestValidationError(
            [
                {
                    "type": "less_than_equal",
                    "loc": ("query", "limit"),
                    "msg": f"Input should be less than or equal to {max_limit}",
                    "input": limit,
                    "ctx": {"le": max_limit},
                }
            ]
        )
    return limit


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/users", response_model=UsersListRes, tags=["users"])
def list_users(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1, description="Default y máximo: Settings"),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    result = use_case.execute(page=page, limit=_page_limit(limit))
    if result.error is not None:
        raise_user_error(result.error)

    users_page = result.page
    if users_page is None:
        raise internal_error("User list unavailable")

    return UsersListRes(
        total=users_page.total,
        page=result.page_number,
        limit=result.limit,
        users=[_to_user_res(u) for u in users_page.users],
    )


@router.get("/users/{user_id}", response_model=UserRes, tags=["users"])
def get_user(
    user_id: int = UserIdPath,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
):
    result = use_case.execute(user_id)
    if result.error is not None:
        raise_user_error(result.error, user_id=user_id)
    return _to_user_res(result.user)


@router.post(
    "/users",
    response_model=CreateUserRes,
    status_code=201,
    tags=["users"],
)
def create_user(
    req: UserReq,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    result = use_case.execute(
        CreateUserInput(
            name=req.name, surname=req.surname, email=req.email, phone=req.phone
        )
    )
    if result.error is not None:
        raise_user_error(result.error)

    if result.user is None or result.generated_password is None:
        raise internal_error("User creation returned no data")

    return CreateUserRes(id=result.user.id, password=result.generated_password)


@router.post("/users/{user_id}/suspend", response_model=MessageRes, tags=["users"])
def suspend_user(
    user_id: int = UserIdPath,
    use_case: SuspendUserUseCase = Depends(get_suspend_user_use_case),
):
    result = use_case.execute(user_id)
    if result.error is not None:
        raise_user_error(result.error, user_id=user_id)
    return _message(f"User with ID: {user_id} successfully suspended")


@router.post("/users/{user_id}/deactivate", response_model=MessageRes, tags=["users"])
def deactivate_user(
    user_id: int = UserIdPath,
    use_case: DeactivateUserUseCase = Depends(get_deactivate_user_use_case),
):
    result = use_case.execute(user_id)
    if result.error is not None:
        raise_user_error(result.error, user_id=user_id)
    return _message(f"User with ID: {user_id} successfully deactivated")


@router.post("/users/{user_id}/activate", response_model=MessageRes, tags=["users"])
def activate_user(
    user_id: int = UserIdPath,
    use_case: ActivateUserUseCase = Depends(get_activate_user_use_case),
):
    result = use_case.execute(user_id)
    if result.error is not None:
        raise_user_error(result.error, user_id=user_id)
    return _message(f"User with ID: {user_id} successfully reactivated")


@router.put("/users/{user_id}", response_model=MessageRes, tags=["users"])
def update_user(
    req: UserReq,
    user_id: int = UserIdPath,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
):
    result = use_case.execute(
        UpdateUserInput(
            user_id=user_id,
            name=req.name,
            surname=req.surname,
            email=req.email,
            phone=req.phone,
        )
    )
    if result.error is not None:
        raise_user_error(result.error, user_id=user_id)
    return _message(f"User with ID: {user_id} successfully updated with the given data")


@router.put("/users/{user_id}/password", response_model=MessageRes, tags=["users"])
def update_password(
    req: PasswordUpdateReq,
    user_id: int = UserIdPath,
    use_case: UpdatePasswordUseCase = Depends(get_update_password_use_case),
):
    result = use_case.execute(
        UpdatePasswordInput(
            user_id=user_id,
            old_password=req.old_password,
            new_password=req.new_password,
            confirm_password=req.confirm_password,
        )
    )
    if result.error is not None:
        raise_user_error(result.error, user_id=user_id)
    return _message(f"Password of user with ID: {user_id} successfully updated")
