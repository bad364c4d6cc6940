"""ShopVibe configuration"""

from pathlib import Path
from typing import Literal
from pydantic_settings import BaseSettings
from functools import lru_cache

from ..cart.store import MergePolicy


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "ShopVibe"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Cart persistence
    cart_storage_backend: Literal["memory", "file"] = "memory"
    cart_storage_dir: Path = Path("var/carts")
    cart_storage_key: str = "cart-storage"
    cart_merge_policy: MergePolicy = MergePolicy.PRESERVE
    cart_session_max_age_hours: int = 24

    # Checkout pricing
    free_shipping_threshold: float = 1000.0
    shipping_fee: float = 50.0
    tax_rate: float = 0.18  # GST

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
