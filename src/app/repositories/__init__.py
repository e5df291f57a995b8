from .products import ProductRepository
from .users import UserRepository

__all__ = ["ProductRepository", "UserRepository"]
