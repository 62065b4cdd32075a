"""User DTOs for API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from scaffold_api.domain.entities.user import UserRole, UserStatus


class UserDto(BaseModel):
    """Registered user data; never carries the password hash."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    email: str
    user_name: str
    status: UserStatus
    role: UserRole
    created_at: datetime
    updated_at: datetime
