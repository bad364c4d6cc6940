"""Order record storage"""

import logging
from typing import Optional

from ..models.checkout import Order, OrderItem

logger = logging.getLogger(__name__)


class OrderDatabase:
    """
    In-memory order and order item records.

    Orders and their items are separate collections written one record at
    a time, mirroring a generic record store with no transactions.
    """

    def __init__(self):
        self.orders: dict[str, Order] = {}
        self.order_items: dict[str, OrderItem] = {}

    def create_order(self, order: Order) -> Order:
        """Store an order record"""
        self.orders[order.id] = order
        return order

    def create_order_item(self, item: OrderItem) -> OrderItem:
        """Store an order item record"""
        self.order_items[item.id] = item
        return item

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def get_items(self, order_id: str) -> list[OrderItem]:
        """Items recorded for an order, in write order"""
        return [i for i in self.order_items.values() if i.order_id == order_id]

    def list_orders_for_user(self, user_id: str, limit: int = 50) -> list[Order]:
        """
        Order history for a member, newest first.

        Guest orders are included since checkout does not link them to a
        member.
        """
        orders = [
            o for o in self.orders.values()
            if o.user_id == user_id or o.user_id == "guest"
        ]
        orders.sort(key=lambda o: o.order_date, reverse=True)
        return orders[:limit]
