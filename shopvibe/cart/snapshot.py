"""
Persisted cart snapshot layout.

A snapshot is a JSON document of the form::

    {"version": 1, "state": {"items": [...], "isOpen": false}}

Line entries use camelCase keys (``productId``, ``name``, ``image``,
``price``, ``currency``, ``sku``, ``description``, ``quantity``).

Documents without a version tag, and version 0 documents written by the
browser storefront (``{"state": {...}, "version": 0}`` with ``_id``,
``productName``, ``mainImage`` and ``shortDescription`` keys), are upgraded
by :func:`migrate` before being parsed.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from ..errors import CartPersistenceError, SnapshotVersionError
from .models import CartLine, CartState

logger = logging.getLogger(__name__)

CURRENT_VERSION = 1

# CartLine attribute -> persisted key
LINE_KEYS = {
    "product_id": "productId",
    "name": "name",
    "image": "image",
    "price": "price",
    "currency": "currency",
    "sku": "sku",
    "description": "description",
    "quantity": "quantity",
}

# version 0 key -> version 1 key
V0_RENAMES = {
    "_id": "productId",
    "productName": "name",
    "mainImage": "image",
    "shortDescription": "description",
}


def dump_state(state: CartState) -> dict[str, Any]:
    """Convert a cart state to its persisted document"""
    return {
        "version": CURRENT_VERSION,
        "state": {
            "items": [
                {key: getattr(line, attr) for attr, key in LINE_KEYS.items()}
                for line in state.items
            ],
            "isOpen": state.is_open,
        },
    }


def _has_line_keys(line: dict[str, Any]) -> bool:
    quantity = line.get("quantity")
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
        return False
    return bool(line.get("productId"))


def _upgrade_v0_line(raw: Any) -> dict[str, Any] | None:
    if not isinstance(raw, dict):
        return None

    line = {}
    for key, value in raw.items():
        key = V0_RENAMES.get(key, key)
        if key in LINE_KEYS.values():
            line[key] = value

    return line if _has_line_keys(line) else None


def _upgrade_v0(body: dict[str, Any]) -> dict[str, Any]:
    raw_items = body.get("items") or []
    if not isinstance(raw_items, list):
        raise CartPersistenceError("Cart snapshot items is not a list")
    items = [line for line in map(_upgrade_v0_line, raw_items) if line is not None]
    if len(items) != len(raw_items):
        logger.info(f"Dropped {len(raw_items) - len(items)} invalid line(s) while upgrading cart snapshot")
    return {"items": items, "isOpen": bool(body.get("isOpen", False))}


def migrate(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Bring a persisted document up to CURRENT_VERSION.

    Raises:
        SnapshotVersionError: document was written by a newer version
        CartPersistenceError: document has an unrecognisable shape
    """
    if "state" in raw:
        version = raw.get("version", 0)
        body = raw["state"]
    else:
        version = 0
        body = raw

    if not isinstance(version, int) or isinstance(version, bool) or version < 0:
        raise CartPersistenceError(f"Invalid cart snapshot version: {version!r}")
    if not isinstance(body, dict):
        raise CartPersistenceError("Cart snapshot state is not an object")

    if version > CURRENT_VERSION:
        raise SnapshotVersionError(version, CURRENT_VERSION)

    if version == 0:
        body = _upgrade_v0(body)

    return {"version": CURRENT_VERSION, "state": body}


def _load_line(raw: Any) -> CartLine | None:
    if not isinstance(raw, dict) or not _has_line_keys(raw):
        return None
    try:
        return CartLine(**{attr: raw[key] for attr, key in LINE_KEYS.items() if key in raw})
    except ValidationError:
        return None


def load_state(raw: dict[str, Any]) -> CartState:
    """
    Build a cart state from a persisted document of any known version.

    Lines that do not validate (no product id, missing quantity or one that
    is not a whole number of at least one) and repeats of a product id are
    dropped; the rest of the cart is kept.
    """
    body = migrate(raw)["state"]

    raw_items = body.get("items") or []
    if not isinstance(raw_items, list):
        raise CartPersistenceError("Cart snapshot items is not a list")

    items = []
    seen = set()
    for line in map(_load_line, raw_items):
        # first line wins if a product id repeats
        if line is not None and line.product_id not in seen:
            seen.add(line.product_id)
            items.append(line)
    if len(items) != len(raw_items):
        logger.warning(f"Dropped {len(raw_items) - len(items)} invalid line(s) from cart snapshot")

    try:
        return CartState(items=items, is_open=body.get("isOpen", False))
    except ValidationError as e:
        raise CartPersistenceError(f"Malformed cart snapshot: {e}") from e


def encode(state: CartState) -> str:
    return json.dumps(dump_state(state))


def decode(text: str) -> CartState:
    try:
        raw = json.loads(text)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError and oversized integer literals
        raise CartPersistenceError(f"Cart snapshot is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise CartPersistenceError("Cart snapshot is not a JSON object")

    return load_state(raw)
