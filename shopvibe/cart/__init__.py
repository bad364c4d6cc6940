# Cart store

from .models import CartLine, CartState
from .storage import CartStorage, MemoryCartStorage, JsonFileCartStorage, DEFAULT_STORAGE_KEY
from .store import CartStore, MergePolicy

__all__ = [
    "CartLine",
    "CartState",
    "CartStorage",
    "MemoryCartStorage",
    "JsonFileCartStorage",
    "DEFAULT_STORAGE_KEY",
    "CartStore",
    "MergePolicy",
]
