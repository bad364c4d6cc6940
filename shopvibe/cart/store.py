"""
Cart store.

Holds one visitor's cart lines and the cart panel visibility flag, and
writes the whole state through its storage adapter after every change.
No operation raises: unknown product ids are ignored, missing prices count
as zero, quantities are truncated to whole numbers (ones that cannot be are
ignored) and storage failures only cost durability.
"""

import logging
from enum import Enum
from typing import Optional

from ..errors import CartPersistenceError
from ..models.product import Product
from .models import CartLine, CartState
from .storage import CartStorage, MemoryCartStorage

logger = logging.getLogger(__name__)


def to_quantity(value) -> Optional[int]:
    """Whole-number quantity for value, or None if it has none"""
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


class MergePolicy(str, Enum):
    """What happens to a line's snapshot when its product is added again"""
    PRESERVE = "preserve"  # keep the snapshot from the first add, bump quantity only
    REFRESH = "refresh"  # re-copy display fields from the product being added


class CartStore:
    """Shopping cart state container"""

    def __init__(
        self,
        storage: Optional[CartStorage] = None,
        merge_policy: MergePolicy | str = MergePolicy.PRESERVE,
    ):
        """
        Args:
            storage: persistence adapter; defaults to a private in-memory one
            merge_policy: snapshot handling when an existing product is re-added
        """
        self.storage = storage if storage is not None else MemoryCartStorage()
        self.merge_policy = MergePolicy(merge_policy)
        self._state = self._load()

    def _load(self) -> CartState:
        try:
            state = self.storage.load()
        except CartPersistenceError as e:
            logger.warning(f"Discarding unreadable cart snapshot '{self.storage.key}': {e}")
            return CartState()
        return state if state is not None else CartState()

    def _persist(self) -> None:
        try:
            self.storage.save(self._state)
        except CartPersistenceError as e:
            # state stays valid in memory, it just won't survive a reload
            logger.warning(f"Cart snapshot '{self.storage.key}' not persisted: {e}")

    def _find(self, product_id: str) -> Optional[CartLine]:
        return next(
            (line for line in self._state.items if line.product_id == product_id),
            None,
        )

    # Read access

    @property
    def items(self) -> list[CartLine]:
        """Copies of the cart lines in insertion order"""
        return [line.model_copy() for line in self._state.items]

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    def snapshot(self) -> CartState:
        return self._state.model_copy(deep=True)

    def get_total_items(self) -> int:
        return sum(line.quantity for line in self._state.items)

    def get_total_price(self) -> float:
        return sum((line.line_total for line in self._state.items), 0.0)

    # Mutations

    def add_item(self, product: Product, quantity: int = 1) -> None:
        quantity = to_quantity(quantity)
        if quantity is None or quantity < 1:
            logger.debug(f"Ignoring add of {product.id} with quantity {quantity}")
            return

        existing = self._find(product.id)
        if existing is not None:
            existing.quantity += quantity
            if self.merge_policy is MergePolicy.REFRESH:
                existing.refresh_from(product)
        else:
            self._state.items.append(CartLine.from_product(product, quantity))

        self._persist()

    def remove_item(self, product_id: str) -> None:
        self._state.items = [
            line for line in self._state.items if line.product_id != product_id
        ]
        self._persist()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        requested = quantity
        quantity = to_quantity(quantity)
        if quantity is None:
            logger.debug(f"Ignoring quantity {requested!r} for {product_id}")
            return
        if quantity <= 0:
            self.remove_item(product_id)
            return

        line = self._find(product_id)
        if line is not None:
            line.quantity = quantity
        self._persist()

    def clear_cart(self) -> None:
        self._state.items = []
        self._persist()

    def open_cart(self) -> None:
        self._state.is_open = True
        self._persist()

    def close_cart(self) -> None:
        self._state.is_open = False
        self._persist()

    def toggle_cart(self) -> None:
        self._state.is_open = not self._state.is_open
        self._persist()
