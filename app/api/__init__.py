# API endpoints and routers

from .map_endpoints import router as map_router
from .category_endpoints import router as category_router

__all__ = [
    "map_router",
    "category_router",
]
