# ShopVibe Models
# Cart API models: import from .cart directly, shopvibe.cart depends on this package

from .product import Product, Category, ProductSearchResponse
from .checkout import (
    Order,
    OrderItem,
    OrderDetails,
    OrderStatus,
    OrderSummary,
    CheckoutRequest,
    CheckoutResponse,
    ShippingDetails,
    PaymentMethod,
)

__all__ = [
    "Product",
    "Category",
    "ProductSearchResponse",
    "Order",
    "OrderItem",
    "OrderDetails",
    "OrderStatus",
    "OrderSummary",
    "CheckoutRequest",
    "CheckoutResponse",
    "ShippingDetails",
    "PaymentMethod",
]
