"""Debtors (khata): customer ledgers of unpaid sales and per-sale settlement."""
import reflex as rx
from typing import Dict, List

from motoparts.api.client import ApiError, ApiValidationError
from motoparts.constants import DEFAULT_ITEMS_PER_PAGE, FULL_LIST_LIMIT
from motoparts.services.sale_service import SaleService
from motoparts.utils.calculations import remove_cart_line, sum_amounts
from motoparts.utils.logger import get_logger
from motoparts.utils.pagination import clamp_page, count_pages, page_numbers, slice_page
from motoparts.utils.sanitization import sanitize_search
from .mixin_state import MixinState, require_login
from .sale.cart_mixin import add_product, change_quantity, change_rate, totals_view
from .sales_history_state import EMPTY_SUMMARY
from .types import DebtorLedger, ProductRow, SaleCartItem, SaleSummaryRow

logger = get_logger("DebtorsState")

UNPAID_FILTER = "unpaid"


def filter_ledgers(ledgers: List[Dict], term: str) -> List[Dict]:
    """Matches the customer name, phone or any sale number of the ledger."""
    term = (term or "").strip().lower()
    if not term:
        return list(ledgers)
    result = []
    for ledger in ledgers:
        if term in ledger["name"].lower() or (ledger.get("phone") and term in ledger["phone"]):
            result.append(ledger)
        elif any(str(t.get("sale_id")) == term.lstrip("#") for t in ledger["transactions"]):
            result.append(ledger)
    return result


class DebtorsState(MixinState):
    debtor_ledgers: List[DebtorLedger] = []
    debtor_search: str = ""
    debtor_page: int = 1
    debtor_per_page: int = DEFAULT_ITEMS_PER_PAGE
    debtor_error: str = ""
    debtor_expanded: str = ""

    debtor_sale: SaleSummaryRow = EMPTY_SUMMARY
    debtor_sale_error: str = ""
    debtor_cart_items: List[SaleCartItem] = []
    debtor_product_query: str = ""
    debtor_suggestions: List[ProductRow] = []

    @rx.var
    def debtor_total_pages(self) -> int:
        filtered = filter_ledgers(self.debtor_ledgers, self.debtor_search)
        return count_pages(len(filtered), self.debtor_per_page)

    @rx.var
    def debtor_page_items(self) -> List[DebtorLedger]:
        filtered = filter_ledgers(self.debtor_ledgers, self.debtor_search)
        return slice_page(filtered, self.debtor_page, self.debtor_per_page)

    @rx.var
    def debtor_page_numbers(self) -> List[int]:
        return page_numbers(self.debtor_page, self.debtor_total_pages)

    @rx.var
    def debtor_total_credit(self) -> float:
        return float(sum_amounts(self.debtor_ledgers, "total_credit"))

    @rx.var
    def debtor_cart_totals(self) -> Dict[str, float]:
        return totals_view(self.debtor_cart_items)

    @rx.var
    def debtor_sale_balance(self) -> float:
        return self._round_currency(
            max(self.debtor_sale["total_amount"] - self.debtor_sale["paid_amount"], 0)
        )

    # ------------------------------------------------------------------
    # Ledger list
    # ------------------------------------------------------------------

    def _fetch_ledgers(self):
        self.debtor_error = ""
        try:
            result = SaleService.list_summaries(
                self._api(), page=1, limit=FULL_LIST_LIMIT, status=UNPAID_FILTER
            )
        except ApiError as exc:
            self.debtor_ledgers = []
            return self._api_failure(exc, "debtor", "Loading debtors")
        self.debtor_ledgers = SaleService.build_ledgers(result.items)
        filtered = filter_ledgers(self.debtor_ledgers, self.debtor_search)
        self.debtor_page = clamp_page(self.debtor_page, count_pages(len(filtered), self.debtor_per_page))

    @rx.event
    @require_login
    def load_debtors(self):
        return self._fetch_ledgers()

    @rx.event
    def set_debtor_search(self, value: str):
        self.debtor_search = sanitize_search(value)
        self.debtor_page = 1

    @rx.event
    def debtor_go_to_page(self, page: int):
        filtered = filter_ledgers(self.debtor_ledgers, self.debtor_search)
        self.debtor_page = clamp_page(page, count_pages(len(filtered), self.debtor_per_page))

    @rx.event
    def toggle_debtor(self, ledger_id: str):
        self.debtor_expanded = "" if self.debtor_expanded == ledger_id else ledger_id

    # ------------------------------------------------------------------
    # Sale settlement
    # ------------------------------------------------------------------

    def _fetch_debtor_sale(self):
        self.debtor_sale_error = ""
        sale_id = self._path_id() or self.debtor_sale.get("id")
        if not sale_id:
            self.debtor_sale = EMPTY_SUMMARY
            self.debtor_sale_error = "Sale not found."
            return
        try:
            self.debtor_sale = SaleService.get_summary(self._api(), int(sale_id))
        except ApiError as exc:
            self.debtor_sale = EMPTY_SUMMARY
            return self._api_failure(exc, "debtor_sale", f"Loading sale {sale_id}")

    @rx.event
    @require_login
    def load_debtor_sale(self):
        self.debtor_cart_items = []
        self.debtor_product_query = ""
        self.debtor_suggestions = []
        return self._fetch_debtor_sale()

    @rx.event
    @require_login
    def pay_all(self):
        sale_id = self.debtor_sale.get("id")
        if not sale_id:
            return
        try:
            SaleService.mark_summary_paid(self._api(), int(sale_id))
        except ApiError as exc:
            return self._api_failure(exc, context=f"Paying sale {sale_id}")
        failure = self._fetch_debtor_sale()
        return failure or rx.toast("Sale marked as paid.", duration=3000)

    @rx.event
    @require_login
    def pay_item(self, product_id: int):
        try:
            SaleService.pay_sale_item(self._api(), int(product_id))
        except ApiError as exc:
            return self._api_failure(exc, context=f"Paying item {product_id}")
        failure = self._fetch_debtor_sale()
        return failure or rx.toast("Item marked as paid.", duration=3000)

    # ------------------------------------------------------------------
    # Adding products to an open sale
    # ------------------------------------------------------------------

    @rx.event
    def search_debtor_products(self, value: str):
        self.debtor_product_query = value or ""
        self.debtor_suggestions, failure = self._search_products(value)
        return failure

    @rx.event
    def add_debtor_product(self, product: dict):
        items, error = add_product(self.debtor_cart_items, product)
        if error:
            return rx.toast(error, duration=3000)
        self.debtor_cart_items = items
        self.debtor_product_query = ""
        self.debtor_suggestions = []

    @rx.event
    def remove_debtor_product(self, product_id: int):
        self.debtor_cart_items = remove_cart_line(self.debtor_cart_items, product_id)

    @rx.event
    def set_debtor_quantity(self, product_id: int, value: str):
        items, error = change_quantity(self.debtor_cart_items, product_id, value)
        if error:
            return rx.toast(error, duration=3000)
        self.debtor_cart_items = items

    @rx.event
    def set_debtor_discount(self, product_id: int, value: str):
        self.debtor_cart_items = change_rate(self.debtor_cart_items, product_id, "discount", value)

    @rx.event
    def set_debtor_tax(self, product_id: int, value: str):
        self.debtor_cart_items = change_rate(self.debtor_cart_items, product_id, "tax", value)

    @rx.event
    @require_login
    def submit_debtor_products(self):
        sale_id = self.debtor_sale.get("id")
        if not sale_id:
            return
        if not self.debtor_cart_items:
            return rx.toast("No item selected", duration=3000)
        try:
            SaleService.add_products_to_summary(self._api(), int(sale_id), self.debtor_cart_items)
        except ApiValidationError as exc:
            message = next(iter(exc.field_errors.values()), exc.message)
            return rx.toast.error(message, duration=4000)
        except ApiError as exc:
            return self._api_failure(exc, context=f"Adding products to sale {sale_id}")
        self.debtor_cart_items = []
        if hasattr(self, "_refresh_low_stock_count"):
            self._refresh_low_stock_count()
        failure = self._fetch_debtor_sale()
        return failure or rx.toast("Products added to the sale.", duration=3000)
