"""
FastAPI dependencies.

Application-wide objects live on ``app.state`` (set up by
``shopvibe.main.create_app``) so each app instance, and each test, gets
its own.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, Response

from ..database import CategoryDatabase, OrderDatabase, ProductDatabase
from ..services.checkout import CheckoutService
from .session import CartSession, CartSessionManager, is_valid_session_id

CART_SESSION_HEADER = "X-Cart-Session"


def get_session_manager(request: Request) -> CartSessionManager:
    return request.app.state.session_manager


def get_product_db(request: Request) -> ProductDatabase:
    return request.app.state.product_db


def get_category_db(request: Request) -> CategoryDatabase:
    return request.app.state.category_db


def get_order_db(request: Request) -> OrderDatabase:
    return request.app.state.order_db


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service


def get_cart_session(
    response: Response,
    x_cart_session: Optional[str] = Header(None),
    manager: CartSessionManager = Depends(get_session_manager),
) -> CartSession:
    """
    Resolve the caller's cart session from the X-Cart-Session header.

    Requests without the header start a new session; its id is echoed back
    in the response header so the client can keep using it.
    """
    if x_cart_session is not None and not is_valid_session_id(x_cart_session):
        raise HTTPException(status_code=400, detail=f"Invalid {CART_SESSION_HEADER} header")

    session = manager.get_or_create_session(x_cart_session)
    response.headers[CART_SESSION_HEADER] = session.session_id
    return session
