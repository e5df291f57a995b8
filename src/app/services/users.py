from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID

from app.models.requests import CreateUserRequest, UpdateUserRequest
from app.models.schema import User
from app.repositories import UserRepository
from app.shared import Logger
from app.shared.errors import ResourceNotFoundError

logger = Logger(__name__).get_logger()


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def create_user(self, request: CreateUserRequest) -> User:
        if self.repository.exists_by_email(request.email):
            raise ValueError(f"User with email {request.email} already exists")

        user = self.repository.save(User(email=request.email, name=request.name))
        logger.info("Created user with id: %s", user.id)
        return user

    def get_user_by_id(self, user_id: UUID) -> User:
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError(f"User not found with id: {user_id}")
        return user

    def get_all_users(self) -> Sequence[User]:
        return self.repository.find_all()

    def get_active_users(self) -> Sequence[User]:
        return self.repository.find_by_active_true()

    def update_user(self, user_id: UUID, request: UpdateUserRequest) -> User:
        user = self.get_user_by_id(user_id)

        if request.name is not None:
            user.name = request.name
        if request.active is not None:
            user.active = request.active
        user.updated_at = datetime.now(UTC)

        user = self.repository.save(user)
        logger.info("Updated user with id: %s", user_id)
        return user

    def delete_user(self, user_id: UUID) -> None:
        user = self.get_user_by_id(user_id)
        self.repository.delete(user)
        logger.info("Deleted user with id: %s", user_id)
