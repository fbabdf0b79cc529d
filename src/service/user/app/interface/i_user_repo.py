from abc import ABC, abstractmethod
from typing import Optional

from src.service.user.domain.entity.user_entity import UserEntity


class IUserRepo(ABC):
    """User repository abstract interface"""

    @abstractmethod
    async def find(self, user_id: int) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> list[UserEntity]:
        pass

    @abstractmethod
    async def save(self, user: UserEntity) -> UserEntity:
        pass
