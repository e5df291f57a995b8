from .products import (
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
    UpdateStockRequest,
)
from .serde_base import SerdeBase
from .users import CreateUserRequest, UpdateUserRequest, UserResponse

__all__ = [
    "CreateProductRequest",
    "CreateUserRequest",
    "ProductResponse",
    "SerdeBase",
    "UpdateProductRequest",
    "UpdateStockRequest",
    "UpdateUserRequest",
    "UserResponse",
]
