from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from src.service.user.domain.entity.user_entity import UserEntity, UserRole


class CreateUserRequest(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1, max_length=255)
    role: UserRole = UserRole.BUYER

    model_config = {
        'json_schema_extra': {
            'example': {
                'email': 'buyer@example.com',
                'name': 'Buyer',
                'role': 'buyer',
            }
        }
    }


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    role: UserRole
    is_active: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'UserResponse':
        return cls(
            id=user.id or 0,
            email=user.email,
            name=user.name,
            role=user.role,
            is_active=user.is_active,
            created_at=user.created_at,
        )
