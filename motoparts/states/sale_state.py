import reflex as rx

from .mixin_state import MixinState, require_login
from .sale import CartMixin, CheckoutMixin


class SaleState(MixinState, CartMixin, CheckoutMixin):
    """New-sale screen: the cart plus checkout."""

    @rx.event
    @require_login
    def load_new_sale(self):
        self.start_new_sale()
