from src.platform.logging.loguru_io import Logger
from src.service.user.app.interface.i_user_repo import IUserRepo
from src.service.user.domain.entity.user_entity import UserEntity


class ListUsersUseCase:
    def __init__(self, user_repo: IUserRepo) -> None:
        self.user_repo = user_repo

    @Logger.io
    async def list_users(self, *, active_only: bool = False) -> list[UserEntity]:
        users = await self.user_repo.list_all()
        if active_only:
            return [user for user in users if user.is_active]
        return users
