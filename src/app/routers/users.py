from uuid import UUID

from fastapi import APIRouter, status

from app.dependencies import UserServiceDep
from app.models.requests import CreateUserRequest, UpdateUserRequest, UserResponse

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a new user")
def create_user(
    request: CreateUserRequest, service: UserServiceDep
) -> UserResponse:
    return UserResponse.from_user(service.create_user(request))


@router.get("", summary="Get all users")
def get_all_users(service: UserServiceDep) -> list[UserResponse]:
    return [UserResponse.from_user(u) for u in service.get_all_users()]


@router.get("/active", summary="Get all active users")
def get_active_users(service: UserServiceDep) -> list[UserResponse]:
    return [UserResponse.from_user(u) for u in service.get_active_users()]


@router.get("/{user_id}", summary="Get user by ID")
def get_user_by_id(user_id: UUID, service: UserServiceDep) -> UserResponse:
    return UserResponse.from_user(service.get_user_by_id(user_id))


@router.put("/{user_id}", summary="Update user")
def update_user(
    user_id: UUID, request: UpdateUserRequest, service: UserServiceDep
) -> UserResponse:
    return UserResponse.from_user(service.update_user(user_id, request))


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete user"
)
def delete_user(user_id: UUID, service: UserServiceDep) -> None:
    service.delete_user(user_id)
