"""Cart line and cart state models"""

from typing import Optional

from pydantic import BaseModel, Field

from ..models.product import Product


class CartLine(BaseModel):
    """One product-and-quantity entry in a cart.

    Display fields are a snapshot of the product taken when the line was
    created; they are not re-fetched from the catalog afterwards.
    """
    product_id: str
    name: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    sku: Optional[str] = None
    description: Optional[str] = None
    quantity: int = Field(default=1, ge=1)

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "CartLine":
        """Create a line copying the product's display fields"""
        line = cls(product_id=product.id, quantity=quantity)
        line.refresh_from(product)
        return line

    def refresh_from(self, product: Product) -> None:
        """Overwrite the snapshot fields with the product's current values"""
        self.name = product.name
        self.image = product.image
        self.price = product.price
        self.currency = product.currency
        self.sku = product.sku
        self.description = product.short_description

    @property
    def line_total(self) -> float:
        return (self.price or 0) * self.quantity


class CartState(BaseModel):
    """Everything a cart store persists"""
    items: list[CartLine] = []
    is_open: bool = False
