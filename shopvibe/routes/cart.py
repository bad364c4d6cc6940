"""Cart API routes"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Depends

from ..models.cart import AddToCartRequest, UpdateCartItemRequest, CartResponse
from ..database import ProductDatabase
from ..core.dependencies import get_cart_session, get_product_db
from ..core.session import CartSession

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _cart_response(session: CartSession, message: Optional[str] = None) -> CartResponse:
    cart = session.cart
    return CartResponse(
        session_id=session.session_id,
        items=cart.items,
        is_open=cart.is_open,
        total_items=cart.get_total_items(),
        total_price=cart.get_total_price(),
        message=message,
    )


def _require_line(session: CartSession, product_id: str) -> None:
    if not any(line.product_id == product_id for line in session.cart.items):
        raise HTTPException(status_code=404, detail="Item not in cart")


@router.get("", response_model=CartResponse)
async def get_cart(session: CartSession = Depends(get_cart_session)):
    """Get the session's cart"""
    return _cart_response(session)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    session: CartSession = Depends(get_cart_session),
    product_db: ProductDatabase = Depends(get_product_db),
):
    """Add an item to the cart"""
    product = product_db.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    session.cart.add_item(product, request.quantity)
    return _cart_response(session, message=f"Added {request.quantity}x {product.name} to cart")


@router.put("/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    session: CartSession = Depends(get_cart_session),
):
    """Set an item's quantity; zero or less removes it"""
    _require_line(session, product_id)
    session.cart.update_quantity(product_id, request.quantity)
    message = "Item removed" if request.quantity <= 0 else "Cart updated"
    return _cart_response(session, message=message)


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: str,
    session: CartSession = Depends(get_cart_session),
):
    """Remove an item from the cart"""
    _require_line(session, product_id)
    session.cart.remove_item(product_id)
    return _cart_response(session, message="Item removed")


@router.delete("", response_model=CartResponse)
async def clear_cart(session: CartSession = Depends(get_cart_session)):
    """Clear all items from cart"""
    session.cart.clear_cart()
    return _cart_response(session, message="Cart cleared")


@router.post("/open", response_model=CartResponse)
async def open_cart(session: CartSession = Depends(get_cart_session)):
    session.cart.open_cart()
    return _cart_response(session)


@router.post("/close", response_model=CartResponse)
async def close_cart(session: CartSession = Depends(get_cart_session)):
    session.cart.close_cart()
    return _cart_response(session)


@router.post("/toggle", response_model=CartResponse)
async def toggle_cart(session: CartSession = Depends(get_cart_session)):
    session.cart.toggle_cart()
    return _cart_response(session)
