from src.platform.logging.loguru_io import Logger
from src.service.user.app.interface.i_user_repo import IUserRepo
from src.service.user.domain.entity.user_entity import UserEntity


class GetUserUseCase:
    def __init__(self, user_repo: IUserRepo) -> None:
        self.user_repo = user_repo

    @Logger.io
    async def get_user(self, user_id: int) -> UserEntity:
        user = await self.user_repo.find(user_id)
        return UserEntity.validate_user_exists(user, user_id)
