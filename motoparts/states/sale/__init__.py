from .cart_mixin import CartMixin
from .checkout_mixin import CheckoutMixin

__all__ = ["CartMixin", "CheckoutMixin"]
