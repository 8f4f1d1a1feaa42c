"""User management API routes (admin only)."""
from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.api.dependencies import require_admin_key
from app.api.v1.schemas.error_schemas import ErrorResponseSchema
from app.api.v1.schemas.user_schemas import (
    ChangePasswordSchema,
    CreateUserSchema,
    RenameUserSchema,
    UserResponseSchema,
)
from app.application.dto.user_dto import CreateUserRequest
from app.application.use_cases.user_use_case import UserUseCase
from app.core.dependencies import get_user_use_case

router = APIRouter(
    tags=["users"],
    dependencies=[Depends(require_admin_key)],
    responses={
        404: {"model": ErrorResponseSchema},
        409: {"model": ErrorResponseSchema},
    },
)


@router.post("/users", response_model=UserResponseSchema, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: CreateUserSchema,
    use_case: UserUseCase = Depends(get_user_use_case),
):
    """Register a user; 409 when the username is taken."""
    created = await use_case.create_user(
        CreateUserRequest(username=payload.username, password=payload.password, role=payload.role)
    )
    return UserResponseSchema.model_validate(created)


@router.get("/users/{user_id}", response_model=UserResponseSchema)
async def get_user(user_id: UUID, use_case: UserUseCase = Depends(get_user_use_case)):
    return UserResponseSchema.model_validate(await use_case.find_by_id(user_id))


@router.put("/users/{user_id}/username", response_model=UserResponseSchema)
async def rename_user(
    user_id: UUID,
    payload: RenameUserSchema,
    use_case: UserUseCase = Depends(get_user_use_case),
):
    return UserResponseSchema.model_validate(await use_case.rename(user_id, payload.username))


@router.put("/users/{user_id}/password", response_model=UserResponseSchema)
async def change_password(
    user_id: UUID,
    payload: ChangePasswordSchema,
    use_case: UserUseCase = Depends(get_user_use_case),
):
    return UserResponseSchema.model_validate(
        await use_case.change_password(user_id, payload.password)
    )
