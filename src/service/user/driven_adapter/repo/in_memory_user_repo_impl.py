from datetime import datetime, timezone
from itertools import count
from typing import Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.user.app.interface.i_user_repo import IUserRepo
from src.service.user.domain.entity.user_entity import UserEntity


class InMemoryUserRepoImpl(IUserRepo):
    """Dict-backed storage. Lives as long as the container that provides it."""

    def __init__(self) -> None:
        self._users: dict[int, UserEntity] = {}
        self._ids = count(1)

    @Logger.io
    async def find(self, user_id: int) -> Optional[UserEntity]:
        user = self._users.get(user_id)
        return attrs.evolve(user) if user else None

    @Logger.io
    async def find_by_email(self, email: str) -> Optional[UserEntity]:
        for user in self._users.values():
            if user.email.lower() == email.lower():
                return attrs.evolve(user)
        return None

    @Logger.io
    async def list_all(self) -> list[UserEntity]:
        return [attrs.evolve(user) for user in self._users.values()]

    @Logger.io
    async def save(self, user: UserEntity) -> UserEntity:
        stored = attrs.evolve(
            user,
            id=user.id if user.id is not None else next(self._ids),
            created_at=user.created_at or datetime.now(timezone.utc),
        )
        self._users[stored.id] = stored  # type: ignore[index]
        return attrs.evolve(stored)
