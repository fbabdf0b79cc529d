"""
User Creation Use Case (Use Case Layer)
"""

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.user.app.interface.i_user_repo import IUserRepo
from src.service.user.domain.entity.user_entity import UserEntity, UserRole


class CreateUserUseCase:
    def __init__(self, user_repo: IUserRepo) -> None:
        self.user_repo = user_repo

    @Logger.io
    async def create_user(
        self,
        email: str,
        name: str,
        role: UserRole | str = UserRole.BUYER,
    ) -> UserEntity:
        validated_role = UserEntity.validate_role(role)

        if await self.user_repo.find_by_email(email):
            raise ConflictError(f'User with email {email} already exists')

        user_entity = UserEntity(email=email, name=name, role=validated_role, is_active=True)
        return await self.user_repo.save(user_entity)
