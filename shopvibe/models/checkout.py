"""Checkout and order models"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class PaymentMethod(str, Enum):
    CARD = "card"
    UPI = "upi"
    NET_BANKING = "netbanking"
    CASH_ON_DELIVERY = "cod"


class ShippingDetails(BaseModel):
    """Shipping details entered at checkout"""
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    address: str
    city: str
    state: str
    pincode: str
    country: str = "India"

    @property
    def formatted_address(self) -> str:
        return f"{self.address}, {self.city}, {self.state} {self.pincode}, {self.country}"


class CheckoutRequest(BaseModel):
    """Request to place an order from the session's cart"""
    shipping: ShippingDetails
    payment_method: PaymentMethod = PaymentMethod.CARD
    # Member login email; guest checkout when omitted
    user_id: Optional[str] = None


class OrderSummary(BaseModel):
    """Totals shown on the checkout page"""
    item_count: int
    subtotal: float
    shipping: float
    tax: float
    total: float


class Order(BaseModel):
    """Order record"""
    id: str
    order_number: str
    order_date: datetime
    total_amount: float
    order_status: OrderStatus = OrderStatus.PENDING
    shipping_address: str
    shipping_method: str = "Standard Shipping"
    tracking_number: Optional[str] = None
    item_count: int
    user_id: str = "guest"


class OrderItem(BaseModel):
    """One line of an order record"""
    id: str
    order_id: str
    product_name: Optional[str] = None
    product_sku: Optional[str] = None
    product_image: Optional[str] = None
    product_description: Optional[str] = None
    quantity: int = Field(ge=1)
    unit_price: float = 0.0
    line_item_total: float = 0.0


class OrderDetails(BaseModel):
    """Order with its items"""
    order: Order
    items: list[OrderItem]


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    items: list[OrderItem] = []
    summary: Optional[OrderSummary] = None
    message: Optional[str] = None
