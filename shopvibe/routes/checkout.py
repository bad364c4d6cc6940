"""Checkout API routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends, Query

from ..models.checkout import (
    CheckoutRequest,
    CheckoutResponse,
    Order,
    OrderDetails,
    OrderSummary,
)
from ..database import OrderDatabase
from ..services.checkout import CheckoutService
from ..core.dependencies import get_cart_session, get_checkout_service, get_order_db
from ..core.session import CartSession
from ..errors import EmptyCartError, OrderRecordError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.get("/summary", response_model=OrderSummary)
async def checkout_summary(
    session: CartSession = Depends(get_cart_session),
    checkout_service: CheckoutService = Depends(get_checkout_service),
):
    """Order totals for the session's cart"""
    return checkout_service.summarize(session.cart)


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    session: CartSession = Depends(get_cart_session),
    checkout_service: CheckoutService = Depends(get_checkout_service),
):
    """
    Place an order for the session's cart.

    The cart is cleared only once the order and all its items are recorded.
    """
    summary = checkout_service.summarize(session.cart)

    try:
        order, items = checkout_service.place_order(
            session.cart,
            shipping=request.shipping,
            user_id=request.user_id,
        )
    except EmptyCartError:
        raise HTTPException(status_code=400, detail="Cart is empty")
    except OrderRecordError as e:
        logger.error(f"Checkout failed for session {session.session_id}: {e}")
        raise HTTPException(
            status_code=502,
            detail="There was an error placing your order. Please try again.",
        )

    logger.info(
        f"Session {session.session_id} placed order {order.order_number} "
        f"({request.payment_method.value})"
    )

    return CheckoutResponse(
        success=True,
        order=order,
        items=items,
        summary=summary,
        message=f"Order {order.order_number} has been confirmed",
    )


@router.get("/orders", response_model=list[Order])
async def list_orders(
    user_id: str = Query("guest", description="Member login email"),
    limit: int = Query(50, ge=1, le=200),
    order_db: OrderDatabase = Depends(get_order_db),
):
    """Order history for a member, newest first"""
    return order_db.list_orders_for_user(user_id, limit=limit)


@router.get("/orders/{order_id}", response_model=OrderDetails)
async def get_order(
    order_id: str,
    order_db: OrderDatabase = Depends(get_order_db),
):
    """Get order details with its items"""
    order = order_db.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderDetails(order=order, items=order_db.get_items(order_id))
