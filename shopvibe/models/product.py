"""Product and category models"""

from pydantic import BaseModel, Field
from typing import Optional


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str
    category: Optional[str] = None  # category slug
    image: Optional[str] = None
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    currency: str = "INR"
    sku: Optional[str] = None
    is_featured: bool = False

    class Config:
        from_attributes = True


class Category(BaseModel):
    """Product category"""
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    image: Optional[str] = None
    is_active: bool = True
    display_order: int = 0


class ProductSearchResponse(BaseModel):
    """Response from product search"""
    products: list[Product]
    total: int
    limit: int
    offset: int
