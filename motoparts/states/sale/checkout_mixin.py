from typing import List

import reflex as rx

from motoparts.api.client import ApiError, ApiValidationError
from motoparts.constants import DEFAULT_CUSTOMER_NAME
from motoparts.enums import PaymentStatus
from motoparts.services.sale_service import SaleService
from motoparts.utils.calculations import calculate_cart_totals
from motoparts.utils.formatting import parse_float_safe
from motoparts.utils.logger import get_logger
from motoparts.utils.sanitization import sanitize_name
from motoparts.utils.validators import validate_payment

logger = get_logger("CheckoutMixin")

PAYMENT_STATUS_OPTIONS: List[str] = [
    PaymentStatus.PAID.value,
    PaymentStatus.UNPAID.value,
    PaymentStatus.PARTIAL.value,
]


class CheckoutMixin:
    customer_name: str = ""
    payment_status: str = PaymentStatus.PAID.value
    amount_paid: str = ""
    checkout_error: str = ""

    @rx.var
    def payment_status_options(self) -> List[str]:
        return PAYMENT_STATUS_OPTIONS

    def _reset_checkout(self):
        self.customer_name = ""
        self.payment_status = PaymentStatus.PAID.value
        self.amount_paid = ""
        self.checkout_error = ""

    def _cart_total(self) -> float:
        return float(calculate_cart_totals(self.cart_items)["total"])

    @rx.event
    def start_new_sale(self):
        """Entering the new-sale screen always starts from an empty cart."""
        self._reset_cart()
        self._reset_checkout()

    @rx.event
    def set_customer_name(self, value: str):
        self.customer_name = value or ""

    @rx.event
    def set_payment_status(self, status: str):
        if status not in PAYMENT_STATUS_OPTIONS:
            return
        self.payment_status = status
        self.checkout_error = ""
        if status == PaymentStatus.PAID.value:
            self.amount_paid = f"{self._cart_total():.2f}"
        elif status == PaymentStatus.UNPAID.value:
            self.amount_paid = "0"
        else:
            self.amount_paid = ""

    @rx.event
    def set_amount_paid(self, value: str):
        self.amount_paid = value or ""
        self.checkout_error = ""

    def _payment_amount(self, total: float) -> float:
        if self.amount_paid.strip() == "" and self.payment_status == PaymentStatus.PAID.value:
            return total
        if self.amount_paid.strip() == "" and self.payment_status == PaymentStatus.UNPAID.value:
            return 0.0
        return parse_float_safe(self.amount_paid, -1.0)

    @rx.event
    def submit_sale(self):
        if not self.cart_items:
            return rx.toast("No item selected", duration=3000)
        total = self._cart_total()
        error = validate_payment(self.payment_status, self._payment_amount(total), total)
        if error:
            self.checkout_error = error
            return rx.toast(error, duration=3000)
        try:
            dto = SaleService.build_sale(
                self.cart_items,
                sanitize_name(self.customer_name) or DEFAULT_CUSTOMER_NAME,
                self.payment_status,
            )
            SaleService.create_sale(self._api(), dto)
        except ValueError as exc:
            self.checkout_error = str(exc)
            return rx.toast(str(exc), duration=3000)
        except ApiValidationError as exc:
            message = next(iter(exc.field_errors.values()), exc.message)
            self.checkout_error = message
            return rx.toast.error(message, duration=4000)
        except ApiError as exc:
            return self._api_failure(exc, "checkout", "Creating sale")
        self._reset_cart()
        self._reset_checkout()
        if hasattr(self, "_refresh_low_stock_count"):
            self._refresh_low_stock_count()
        return [
            rx.toast("Sale completed successfully.", duration=3000),
            rx.redirect("/sales"),
        ]
