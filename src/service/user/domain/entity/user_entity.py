from datetime import datetime
from enum import Enum
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError, NotFoundError


class UserRole(str, Enum):
    SELLER = 'seller'
    BUYER = 'buyer'
    ADMIN = 'admin'


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    id: Optional[int] = None
    role: UserRole = UserRole.BUYER
    is_active: bool = True
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity'], user_id: int) -> 'UserEntity':
        if not user_entity:
            raise NotFoundError(f'User {user_id} not found')

        return user_entity

    @staticmethod
    def validate_role(role: UserRole | str) -> UserRole:
        """Validate if the role is valid"""
        valid_roles = [r.value for r in UserRole.__members__.values()]
        if role not in valid_roles:
            raise DomainError(f'Invalid role: {role}. Must be one of: {", ".join(valid_roles)}')
        return UserRole(role)
