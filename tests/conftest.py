"""
Pytest configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from shopvibe.cart import CartStore, MemoryCartStorage
from shopvibe.core.config import Settings
from shopvibe.main import create_app
from shopvibe.models.product import Product


@pytest.fixture
def make_product():
    """Factory for catalog products."""
    def _make(product_id="prod-a", price=100.0, **fields):
        fields.setdefault("name", f"Product {product_id}")
        fields.setdefault("sku", f"SKU-{product_id.upper()}")
        fields.setdefault("image", f"/static/images/{product_id}.jpg")
        fields.setdefault("short_description", f"Description of {product_id}")
        return Product(id=product_id, price=price, **fields)
    return _make


@pytest.fixture
def storage_backend():
    """Shared dict standing in for browser local storage."""
    return {}


@pytest.fixture
def cart(storage_backend):
    """Empty cart store persisting into storage_backend."""
    return CartStore(storage=MemoryCartStorage(backend=storage_backend))


@pytest.fixture
def settings(tmp_path):
    """Settings independent of the environment and any .env file."""
    return Settings(
        _env_file=None,
        cart_storage_backend="memory",
        cart_storage_dir=tmp_path / "carts",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def shipping_details():
    return {
        "first_name": "Asha",
        "last_name": "Rao",
        "email": "asha@example.com",
        "phone": "9876543210",
        "address": "12 MG Road",
        "city": "Bengaluru",
        "state": "Karnataka",
        "pincode": "560001",
    }
