"""Exceptions raised by ShopVibe components"""


class ShopVibeError(Exception):
    """Base class for all ShopVibe errors"""


class CartPersistenceError(ShopVibeError):
    """Cart state could not be read from or written to its storage"""


class SnapshotVersionError(CartPersistenceError):
    """Persisted cart snapshot was written by a newer schema version"""

    def __init__(self, version: int, supported: int):
        super().__init__(
            f"Cart snapshot version {version} is newer than supported version {supported}"
        )
        self.version = version
        self.supported = supported


class EmptyCartError(ShopVibeError):
    """Checkout was attempted with no lines in the cart"""


class OrderRecordError(ShopVibeError):
    """An order or order item record could not be written"""
