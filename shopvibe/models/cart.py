"""Cart API models"""

from pydantic import BaseModel, Field
from typing import Optional

from ..cart.models import CartLine


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: str
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(BaseModel):
    """Request to set an item's quantity; zero or less removes it"""
    quantity: int


class CartResponse(BaseModel):
    """Cart API response"""
    session_id: str
    items: list[CartLine]
    is_open: bool
    total_items: int
    total_price: float
    message: Optional[str] = None
