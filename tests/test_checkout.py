"""
Tests for the checkout service
"""

import pytest

from shopvibe.database import OrderDatabase
from shopvibe.errors import EmptyCartError, OrderRecordError
from shopvibe.models.checkout import OrderStatus, ShippingDetails
from shopvibe.services.checkout import CheckoutService


class FailingOrderDatabase(OrderDatabase):
    """Record store whose item writes start failing after a number of writes."""

    def __init__(self, fail_after):
        super().__init__()
        self.fail_after = fail_after

    def create_order_item(self, item):
        if len(self.order_items) >= self.fail_after:
            raise OrderRecordError("record service unavailable")
        return super().create_order_item(item)


@pytest.fixture
def order_db():
    return OrderDatabase()


@pytest.fixture
def service(order_db):
    return CheckoutService(order_db)


@pytest.fixture
def shipping(shipping_details):
    return ShippingDetails(**shipping_details)


class TestSummary:
    """Tests for order totals."""

    def test_small_order_pays_shipping(self, service, cart, make_product):
        """Test subtotal up to the threshold adds the shipping fee and GST."""
        cart.add_item(make_product("prod-a", price=400), 2)

        summary = service.summarize(cart)

        assert summary.item_count == 2
        assert summary.subtotal == 800
        assert summary.shipping == 50
        assert summary.tax == pytest.approx(144)
        assert summary.total == pytest.approx(994)

    def test_threshold_is_exclusive(self, service, cart, make_product):
        cart.add_item(make_product("prod-a", price=1000))

        assert service.summarize(cart).shipping == 50

    def test_free_shipping_over_threshold(self, service, cart, make_product):
        cart.add_item(make_product("prod-a", price=1000.5))

        summary = service.summarize(cart)

        assert summary.shipping == 0
        assert summary.total == pytest.approx(1000.5 * 1.18)

    def test_custom_rates(self, order_db, cart, make_product):
        service = CheckoutService(order_db, free_shipping_threshold=100, shipping_fee=10, tax_rate=0.1)
        cart.add_item(make_product("prod-a", price=50))

        summary = service.summarize(cart)

        assert summary.shipping == 10
        assert summary.total == pytest.approx(65)


class TestPlaceOrder:
    """Tests for placing orders."""

    def test_place_order(self, service, order_db, cart, make_product, shipping):
        """Test an order and one item per line are recorded and the cart emptied."""
        cart.add_item(make_product("prod-a", price=400), 2)
        cart.add_item(make_product("prod-b", price=None))

        order, items = service.place_order(cart, shipping, user_id="asha@example.com")

        assert order.order_number.startswith("ORD-")
        assert order.order_status == OrderStatus.PENDING
        assert order.shipping_method == "Standard Shipping"
        assert order.shipping_address == "12 MG Road, Bengaluru, Karnataka 560001, India"
        assert order.item_count == 3
        assert order.total_amount == pytest.approx(994)
        assert order.user_id == "asha@example.com"

        assert order_db.get_order(order.id) == order
        assert order_db.get_items(order.id) == items
        assert [i.product_name for i in items] == ["Product prod-a", "Product prod-b"]
        assert items[0].unit_price == 400
        assert items[0].line_item_total == 800
        assert items[0].product_sku == "SKU-PROD-A"
        assert items[1].unit_price == 0
        assert items[1].line_item_total == 0

        assert cart.items == []

    def test_guest_checkout(self, service, cart, make_product, shipping):
        cart.add_item(make_product("prod-a"))

        order, _ = service.place_order(cart, shipping)

        assert order.user_id == "guest"

    def test_empty_cart_rejected(self, service, order_db, cart, shipping):
        with pytest.raises(EmptyCartError):
            service.place_order(cart, shipping)

        assert order_db.orders == {}

    def test_failed_item_write_keeps_cart(self, cart, make_product, shipping):
        """Test a failing item write leaves earlier records and the cart in place."""
        order_db = FailingOrderDatabase(fail_after=1)
        service = CheckoutService(order_db)
        cart.add_item(make_product("prod-a"))
        cart.add_item(make_product("prod-b"))

        with pytest.raises(OrderRecordError):
            service.place_order(cart, shipping)

        assert len(order_db.orders) == 1
        assert len(order_db.order_items) == 1
        assert cart.get_total_items() == 2

    def test_uses_cart_price_snapshot(self, service, cart, make_product, shipping):
        """Test orders are priced from the cart lines, not the current product."""
        cart.add_item(make_product("prod-a", price=100))
        cart.add_item(make_product("prod-a", price=999))

        _, items = service.place_order(cart, shipping)

        assert items[0].unit_price == 100
        assert items[0].quantity == 2


class TestOrderHistory:
    """Tests for listing orders."""

    def test_member_history_includes_guest_orders(self, service, order_db, cart, make_product, shipping):
        placed = []
        for user_id in ("asha@example.com", None, "other@example.com"):
            cart.add_item(make_product("prod-a"))
            placed.append(service.place_order(cart, shipping, user_id=user_id)[0])

        history = order_db.list_orders_for_user("asha@example.com")

        assert {o.id for o in history} == {placed[0].id, placed[1].id}
        assert history == sorted(history, key=lambda o: o.order_date, reverse=True)
