from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from app.repositories import ProductRepository, UserRepository
from app.services import ProductService, UserService
from app.shared.db import get_session

SessionDep = Annotated[Session, Depends(get_session)]


def get_product_service(session: SessionDep) -> ProductService:
    return ProductService(ProductRepository(session))


def get_user_service(session: SessionDep) -> UserService:
    return UserService(UserRepository(session))


ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
