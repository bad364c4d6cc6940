# Services

from .checkout import CheckoutService

__all__ = ["CheckoutService"]
