# Core modules

from .config import Settings, get_settings
from .session import CartSession, CartSessionManager

__all__ = ["Settings", "get_settings", "CartSession", "CartSessionManager"]
