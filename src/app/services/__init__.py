from .products import ProductService
from .users import UserService

__all__ = ["ProductService", "UserService"]
