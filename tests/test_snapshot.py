"""
Tests for the persisted cart snapshot format
"""

import json

import pytest

from shopvibe.cart import CartLine, CartState
from shopvibe.cart.snapshot import CURRENT_VERSION, decode, dump_state, encode, load_state, migrate
from shopvibe.errors import CartPersistenceError, SnapshotVersionError


@pytest.fixture
def state():
    return CartState(
        items=[
            CartLine(product_id="prod-a", name="Laptop", price=55000, currency="INR",
                     sku="SKU-1", image="/img/a.jpg", description="Fast", quantity=2),
            CartLine(product_id="prod-b", name="No price", quantity=1),
        ],
        is_open=True,
    )


class TestLayout:
    """Tests for the version 1 document."""

    def test_dump_state(self, state):
        """Test documents carry a version tag and camelCase keys."""
        document = dump_state(state)

        assert document["version"] == CURRENT_VERSION == 1
        assert document["state"]["isOpen"] is True
        first = document["state"]["items"][0]
        assert first["productId"] == "prod-a"
        assert first["quantity"] == 2
        assert first["price"] == 55000
        assert set(first) == {
            "productId", "name", "image", "price", "currency", "sku", "description", "quantity",
        }

    def test_encode_decode(self, state):
        """Test a decoded snapshot matches the original state."""
        assert decode(encode(state)) == state

    def test_empty_state(self):
        assert decode(encode(CartState())) == CartState()


class TestMigration:
    """Tests for upgrading older documents."""

    def test_storefront_v0_document(self):
        """Test the browser storefront's persisted layout is upgraded."""
        raw = {
            "state": {
                "items": [
                    {
                        "_id": "prod-a",
                        "productName": "Smartphone",
                        "mainImage": "/img/phone.jpg",
                        "shortDescription": "Latest smartphone",
                        "longDescription": "Not part of a cart line",
                        "price": 25000,
                        "currency": "INR",
                        "sku": "SKU-ELECTRONICS-001",
                        "category": "electronics",
                        "quantity": 2,
                    }
                ],
                "isOpen": False,
            },
            "version": 0,
        }

        state = load_state(raw)

        assert state.is_open is False
        assert len(state.items) == 1
        line = state.items[0]
        assert line.product_id == "prod-a"
        assert line.name == "Smartphone"
        assert line.image == "/img/phone.jpg"
        assert line.description == "Latest smartphone"
        assert line.price == 25000
        assert line.quantity == 2

    def test_unversioned_document(self):
        """Test a bare state object is read as version 0."""
        raw = {"items": [{"productId": "prod-a", "quantity": 1}], "isOpen": True}

        migrated = migrate(raw)

        assert migrated["version"] == CURRENT_VERSION
        assert migrated["state"]["isOpen"] is True
        assert migrated["state"]["items"] == [{"productId": "prod-a", "quantity": 1}]

    def test_v0_invalid_lines_dropped(self):
        """Test lines without an id or with quantity below one are dropped."""
        raw = {
            "state": {
                "items": [
                    {"_id": "keep", "quantity": 1},
                    {"_id": "zero", "quantity": 0},
                    {"_id": "negative", "quantity": -2},
                    {"quantity": 3},
                    "not a line",
                ],
            },
            "version": 0,
        }

        state = load_state(raw)

        assert [line.product_id for line in state.items] == ["keep"]
        assert state.is_open is False

    def test_current_version_passes_through(self, state):
        document = dump_state(state)
        assert migrate(document) == document

    def test_future_version_rejected(self):
        """Test a document from a newer schema is refused."""
        raw = {"version": CURRENT_VERSION + 1, "state": {"items": [], "isOpen": False}}

        with pytest.raises(SnapshotVersionError) as exc_info:
            migrate(raw)

        assert exc_info.value.version == CURRENT_VERSION + 1
        assert isinstance(exc_info.value, CartPersistenceError)


class TestMalformed:
    """Tests for documents that cannot be read."""

    @pytest.mark.parametrize("text", ["", "{oops", "[]", "42", '"cart"'])
    def test_not_an_object(self, text):
        with pytest.raises(CartPersistenceError):
            decode(text)

    @pytest.mark.parametrize("document", [
        {"version": "1", "state": {}},
        {"version": -1, "state": {}},
        {"version": 1, "state": []},
        {"version": 1, "state": {"items": "nope"}},
        {"version": 1, "state": {"items": [], "isOpen": "maybe"}},
        {"version": 0, "state": {"items": "nope"}},
    ])
    def test_invalid_documents(self, document):
        """Test structurally invalid documents raise CartPersistenceError."""
        with pytest.raises(CartPersistenceError):
            decode(json.dumps(document))

    @pytest.mark.parametrize("text", [
        "[" * 200000,
        '{"items": [' * 100000,
    ])
    def test_pathological_json(self, text):
        """Test deeply nested documents raise CartPersistenceError."""
        with pytest.raises(CartPersistenceError):
            decode(text)


class TestInvalidLines:
    """Tests for dropping bad lines from a current version document."""

    @pytest.mark.parametrize("bad_line", [
        {"productId": "bad", "quantity": 0},
        {"productId": "bad", "quantity": -1},
        {"productId": "bad", "quantity": 2.5},
        {"productId": "bad", "quantity": "lots"},
        {"productId": "bad"},
        {"quantity": 2},
        {"productId": None, "quantity": 1},
        {"productId": "bad", "quantity": 1, "price": "free"},
        "not a line",
        None,
    ])
    def test_bad_line_dropped_rest_kept(self, bad_line):
        """Test one invalid line does not discard the other lines."""
        document = {
            "version": 1,
            "state": {
                "items": [
                    {"productId": "prod-a", "price": 10, "quantity": 2},
                    bad_line,
                    {"productId": "prod-b", "quantity": 1},
                ],
                "isOpen": True,
            },
        }

        state = decode(json.dumps(document))

        assert [line.product_id for line in state.items] == ["prod-a", "prod-b"]
        assert state.is_open is True

    def test_repeated_product_keeps_first_line(self):
        document = {
            "version": 1,
            "state": {
                "items": [
                    {"productId": "prod-a", "quantity": 2},
                    {"productId": "prod-a", "quantity": 7},
                ],
            },
        }

        state = decode(json.dumps(document))

        assert len(state.items) == 1
        assert state.items[0].quantity == 2
