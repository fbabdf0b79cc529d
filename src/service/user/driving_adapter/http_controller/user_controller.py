from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.user.app.command.create_user_use_case import CreateUserUseCase
from src.service.user.app.query.get_user_use_case import GetUserUseCase
from src.service.user.app.query.list_users_use_case import ListUsersUseCase
from src.service.user.driving_adapter.http_controller.schema.user_schema import (
    CreateUserRequest,
    UserResponse,
)


router = APIRouter()


@router.post('', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(Provide[Container.create_user_use_case]),
) -> UserResponse:
    user_entity = await use_case.create_user(
        email=request.email,
        name=request.name,
        role=request.role,
    )
    return UserResponse.from_entity(user_entity)


@router.get('', response_model=List[UserResponse])
@Logger.io
@inject
async def list_users(
    active_only: bool = False,
    use_case: ListUsersUseCase = Depends(Provide[Container.list_users_use_case]),
) -> list[UserResponse]:
    users = await use_case.list_users(active_only=active_only)
    return [UserResponse.from_entity(user) for user in users]


@router.get('/{user_id}', response_model=UserResponse)
@Logger.io
@inject
async def get_user(
    user_id: int,
    use_case: GetUserUseCase = Depends(Provide[Container.get_user_use_case]),
) -> UserResponse:
    user_entity = await use_case.get_user(user_id)
    return UserResponse.from_entity(user_entity)
