"""
ShopVibe Application

Storefront API: product browsing, per-visitor carts and checkout.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from .core.config import Settings, get_settings
from .core.session import CartSessionManager
from .database import CategoryDatabase, OrderDatabase, ProductDatabase
from .routes import products_router, categories_router, cart_router, checkout_router
from .services.checkout import CheckoutService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    settings: Settings = app.state.settings
    logger.info(f"{settings.app_name} starting up...")
    logger.info(
        f"Cart storage: {settings.cart_storage_backend}"
        + (f" ({settings.cart_storage_dir})" if settings.cart_storage_backend == "file" else "")
        + f", merge policy: {settings.cart_merge_policy.value}"
    )
    yield
    logger.info(f"{settings.app_name} shutting down...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build an application with its own catalog, orders and cart sessions"""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Storefront API: products, cart and checkout",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.session_manager = CartSessionManager(settings)
    app.state.product_db = ProductDatabase()
    app.state.category_db = CategoryDatabase()
    app.state.order_db = OrderDatabase()
    app.state.checkout_service = CheckoutService(
        app.state.order_db,
        free_shipping_threshold=settings.free_shipping_threshold,
        shipping_fee=settings.shipping_fee,
        tax_rate=settings.tax_rate,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, restrict this
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Cart-Session"],
    )

    # Include API routers
    app.include_router(products_router)
    app.include_router(categories_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)

    @app.get("/")
    async def home():
        """API index"""
        return {
            "message": f"{settings.app_name} API",
            "docs": "/docs",
            "endpoints": {
                "products": "/api/products",
                "categories": "/api/categories",
                "cart": "/api/cart",
                "checkout": "/api/checkout",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "shopvibe",
            "cart_sessions": len(app.state.session_manager.sessions),
        }

    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "shopvibe.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
