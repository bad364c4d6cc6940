# Database modules

from .products import ProductDatabase
from .categories import CategoryDatabase
from .orders import OrderDatabase

__all__ = [
    "ProductDatabase",
    "CategoryDatabase",
    "OrderDatabase",
]
