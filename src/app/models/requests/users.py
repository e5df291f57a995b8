from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.models.schema import User

from .serde_base import SerdeBase

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CreateUserRequest(SerdeBase):
    email: str = Field(..., max_length=320, pattern=EMAIL_PATTERN)
    name: str = Field(..., min_length=1, max_length=255)


class UpdateUserRequest(SerdeBase):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    active: bool | None = None


class UserResponse(SerdeBase):
    id: UUID
    email: str
    name: str
    active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls.model_validate(user)
