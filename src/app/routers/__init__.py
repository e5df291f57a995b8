from .health import router as health_router
from .products import router as products_router
from .users import router as users_router

_routers = [health_router, products_router, users_router]

__all__ = ["get_routers"]


def get_routers():
    return _routers
