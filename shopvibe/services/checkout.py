"""
Checkout service.

Turns a visitor's cart into an order record plus one item record per
cart line, then empties the cart. Records are written one at a time with
no rollback: if an item write fails, the order and any items already
written stay behind and the cart is kept so the visitor can retry.
"""

import time
import uuid
import logging
from datetime import datetime
from typing import Optional

from ..cart import CartStore, CartLine
from ..database.orders import OrderDatabase
from ..errors import EmptyCartError, OrderRecordError
from ..models.checkout import Order, OrderItem, OrderStatus, OrderSummary, ShippingDetails

logger = logging.getLogger(__name__)


class CheckoutService:
    """Places orders from carts"""

    def __init__(
        self,
        order_db: OrderDatabase,
        free_shipping_threshold: float = 1000.0,
        shipping_fee: float = 50.0,
        tax_rate: float = 0.18,
    ):
        self.order_db = order_db
        self.free_shipping_threshold = free_shipping_threshold
        self.shipping_fee = shipping_fee
        self.tax_rate = tax_rate

    def summarize(self, cart: CartStore) -> OrderSummary:
        """Compute the order totals for the cart's current contents"""
        subtotal = cart.get_total_price()
        shipping = 0.0 if subtotal > self.free_shipping_threshold else self.shipping_fee
        tax = subtotal * self.tax_rate
        return OrderSummary(
            item_count=cart.get_total_items(),
            subtotal=subtotal,
            shipping=shipping,
            tax=tax,
            total=subtotal + shipping + tax,
        )

    @staticmethod
    def _order_item(order_id: str, line: CartLine) -> OrderItem:
        unit_price = line.price or 0
        return OrderItem(
            id=str(uuid.uuid4()),
            order_id=order_id,
            product_name=line.name,
            product_sku=line.sku,
            product_image=line.image,
            product_description=line.description,
            quantity=line.quantity,
            unit_price=unit_price,
            line_item_total=unit_price * line.quantity,
        )

    def place_order(
        self,
        cart: CartStore,
        shipping: ShippingDetails,
        user_id: Optional[str] = None,
    ) -> tuple[Order, list[OrderItem]]:
        """
        Place an order for everything in the cart.

        Args:
            cart: the visitor's cart; cleared on success
            shipping: delivery details
            user_id: member login email, or None for a guest checkout

        Returns:
            The order record and its item records

        Raises:
            EmptyCartError: the cart has no lines
            OrderRecordError: a record write failed; the cart is untouched
        """
        lines = cart.items
        if not lines:
            raise EmptyCartError("Cart is empty")

        summary = self.summarize(cart)
        order = Order(
            id=str(uuid.uuid4()),
            order_number=f"ORD-{int(time.time() * 1000)}",
            order_date=datetime.utcnow(),
            total_amount=summary.total,
            order_status=OrderStatus.PENDING,
            shipping_address=shipping.formatted_address,
            item_count=summary.item_count,
            user_id=user_id or "guest",
        )

        self.order_db.create_order(order)

        items = []
        for line in lines:
            try:
                items.append(self.order_db.create_order_item(self._order_item(order.id, line)))
            except OrderRecordError:
                logger.error(
                    f"Order {order.order_number}: item write failed after "
                    f"{len(items)} of {len(lines)} item(s); order left incomplete"
                )
                raise

        cart.clear_cart()

        logger.info(
            f"Order {order.order_number} created: {summary.total:.2f} for "
            f"{summary.item_count} item(s), user={order.user_id}"
        )
        return order, items
