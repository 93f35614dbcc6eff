"""Sales history: sale summaries, sale detail with invoice, sale lines, today's lines."""
import reflex as rx
from typing import Dict, List

from motoparts.api.client import ApiError, ApiValidationError
from motoparts.constants import DEFAULT_ITEMS_PER_PAGE
from motoparts.services.receipt_service import ReceiptService
from motoparts.services.sale_service import SaleService
from motoparts.utils.calculations import sum_amounts
from motoparts.utils.formatting import parse_int_safe
from motoparts.utils.logger import get_logger
from motoparts.utils.pagination import clamp_page, page_after_delete, page_numbers
from .mixin_state import MixinState, require_login
from .types import SaleItemRow, SaleSummaryRow

logger = get_logger("SalesHistoryState")

EMPTY_SUMMARY: SaleSummaryRow = {
    "id": 0,
    "customer_name": "",
    "customer_phone": "",
    "quantity": 0,
    "total_amount": 0.0,
    "paid_amount": 0.0,
    "payment_status": "",
    "created_at": "",
    "items": [],
}

SORTABLE_SALE_FIELDS = ("createdAt", "customerName", "totalAmountSummary", "paymentStatus")

# Backend field names on sale line errors -> form field names
SALE_LINE_FIELD_MAP = {"quantitySold": "quantity"}


class SalesHistoryState(MixinState):
    sales_items: List[SaleSummaryRow] = []
    sales_page: int = 1
    sales_per_page: int = DEFAULT_ITEMS_PER_PAGE
    sales_total_items: int = 0
    sales_total_pages: int = 1
    sales_sort_by: str = "createdAt"
    sales_sort_direction: str = "desc"
    sales_status_filter: str = ""
    sales_error: str = ""

    sale_detail: SaleSummaryRow = EMPTY_SUMMARY
    sale_detail_error: str = ""

    sale_lines_items: List[SaleItemRow] = []
    sale_lines_page: int = 1
    sale_lines_per_page: int = DEFAULT_ITEMS_PER_PAGE
    sale_lines_total_items: int = 0
    sale_lines_total_pages: int = 1
    sale_lines_error: str = ""
    sale_line_editing: Dict[str, str] = {}
    sale_line_quantity: str = ""
    sale_line_errors: Dict[str, str] = {}
    sale_line_delete_id: int = 0

    daily_items: List[SaleItemRow] = []
    daily_page: int = 1
    daily_per_page: int = DEFAULT_ITEMS_PER_PAGE
    daily_total_items: int = 0
    daily_total_pages: int = 1
    daily_error: str = ""

    @rx.var
    def sales_page_numbers(self) -> List[int]:
        return page_numbers(self.sales_page, self.sales_total_pages)

    @rx.var
    def sale_lines_page_numbers(self) -> List[int]:
        return page_numbers(self.sale_lines_page, self.sale_lines_total_pages)

    @rx.var
    def daily_page_numbers(self) -> List[int]:
        return page_numbers(self.daily_page, self.daily_total_pages)

    @rx.var
    def daily_totals(self) -> Dict[str, float]:
        return {
            "revenue": float(sum_amounts(self.daily_items, "total_price")),
            "profit": float(sum_amounts(self.daily_items, "profit")),
        }

    @rx.var
    def sale_detail_balance(self) -> float:
        return self._round_currency(
            max(self.sale_detail["total_amount"] - self.sale_detail["paid_amount"], 0)
        )

    @rx.var
    def sale_line_modal_open(self) -> bool:
        return bool(self.sale_line_editing)

    # ------------------------------------------------------------------
    # Sale summaries
    # ------------------------------------------------------------------

    def _fetch_sales(self):
        self.sales_error = ""
        try:
            result = SaleService.list_summaries(
                self._api(),
                page=self.sales_page,
                limit=self.sales_per_page,
                sort_by=self.sales_sort_by,
                sort_direction=self.sales_sort_direction,
                status=self.sales_status_filter,
            )
        except ApiError as exc:
            self.sales_items = []
            return self._api_failure(exc, "sales", "Loading sales")
        self._apply_page("sales", result)

    @rx.event
    @require_login
    def load_sales(self):
        return self._fetch_sales()

    @rx.event
    @require_login
    def sales_go_to_page(self, page: int):
        target = clamp_page(page, self.sales_total_pages)
        if target == self.sales_page:
            return
        self.sales_page = target
        return self._fetch_sales()

    @rx.event
    @require_login
    def sort_sales(self, field: str):
        """Sorting by the active column flips the direction; a new column starts descending."""
        if field not in SORTABLE_SALE_FIELDS:
            return
        if field == self.sales_sort_by:
            self.sales_sort_direction = "asc" if self.sales_sort_direction == "desc" else "desc"
        else:
            self.sales_sort_by = field
            self.sales_sort_direction = "desc"
        self.sales_page = 1
        return self._fetch_sales()

    @rx.event
    @require_login
    def set_sales_status_filter(self, status: str):
        self.sales_status_filter = "" if status == "ALL" else (status or "")
        self.sales_page = 1
        return self._fetch_sales()

    # ------------------------------------------------------------------
    # Sale detail
    # ------------------------------------------------------------------

    @rx.event
    @require_login
    def load_sale_detail(self):
        self.sale_detail_error = ""
        sale_id = self._path_id()
        if sale_id is None:
            self.sale_detail = EMPTY_SUMMARY
            self.sale_detail_error = "Sale not found."
            return
        try:
            self.sale_detail = SaleService.get_summary(self._api(), sale_id)
        except ApiError as exc:
            self.sale_detail = EMPTY_SUMMARY
            return self._api_failure(exc, "sale_detail", f"Loading sale {sale_id}")

    @rx.event
    def download_invoice(self):
        if not self.sale_detail.get("id"):
            return rx.toast("No sale loaded.", duration=3000)
        pdf = ReceiptService.generate_invoice_pdf(self.sale_detail)
        return rx.download(data=pdf, filename=f"invoice_{self.sale_detail['id']}.pdf")

    # ------------------------------------------------------------------
    # All sale lines
    # ------------------------------------------------------------------

    def _fetch_sale_lines(self):
        self.sale_lines_error = ""
        try:
            result = SaleService.list_sale_items(
                self._api(), page=self.sale_lines_page, limit=self.sale_lines_per_page
            )
        except ApiError as exc:
            self.sale_lines_items = []
            return self._api_failure(exc, "sale_lines", "Loading sale items")
        self._apply_page("sale_lines", result)

    @rx.event
    @require_login
    def load_sale_lines(self):
        return self._fetch_sale_lines()

    @rx.event
    @require_login
    def sale_lines_go_to_page(self, page: int):
        target = clamp_page(page, self.sale_lines_total_pages)
        if target == self.sale_lines_page:
            return
        self.sale_lines_page = target
        return self._fetch_sale_lines()

    @rx.event
    def open_sale_line_editor(self, item: dict):
        self.sale_line_editing = {
            "id": str(item.get("id", "")),
            "product_id": str(item.get("product_id", "")),
            "product_name": item.get("product_name", ""),
            "sku": item.get("sku", ""),
            "unit_price": str(item.get("unit_price", 0)),
        }
        self.sale_line_quantity = str(item.get("quantity_sold", 1))
        self.sale_line_errors = {}

    @rx.event
    def close_sale_line_editor(self):
        self.sale_line_editing = {}
        self.sale_line_quantity = ""
        self.sale_line_errors = {}

    @rx.event
    def set_sale_line_quantity(self, value: str):
        self.sale_line_quantity = value or ""

    @rx.event
    @require_login
    def save_sale_line(self):
        if not self.sale_line_editing:
            return
        quantity = parse_int_safe(self.sale_line_quantity, 0)
        if quantity <= 0:
            self.sale_line_errors = {"quantity": "Quantity must be at least 1."}
            return
        editing = self.sale_line_editing
        item = {
            "id": int(editing["id"]),
            "product_id": parse_int_safe(editing.get("product_id"), 0),
            "product_name": editing.get("product_name", ""),
            "sku": editing.get("sku", ""),
            "unit_price": editing.get("unit_price", "0"),
        }
        try:
            SaleService.update_sale_item(self._api(), item, quantity)
        except ApiValidationError as exc:
            self.sale_line_errors = {
                SALE_LINE_FIELD_MAP.get(field, field): message
                for field, message in exc.field_errors.items()
            }
            return
        except ApiError as exc:
            return self._api_failure(exc, context="Updating sale item")
        self.close_sale_line_editor()
        failure = self._fetch_sale_lines()
        return failure or rx.toast("Sale item updated.", duration=3000)

    @rx.event
    def ask_delete_sale_line(self, item_id: int):
        self.sale_line_delete_id = int(item_id)

    @rx.event
    def cancel_delete_sale_line(self):
        self.sale_line_delete_id = 0

    @rx.event
    @require_login
    def delete_sale_line(self):
        item_id = self.sale_line_delete_id
        self.sale_line_delete_id = 0
        if not item_id:
            return
        try:
            SaleService.delete_sale_item(self._api(), item_id)
        except ApiError as exc:
            return self._api_failure(exc, context="Deleting sale item")
        items_on_page = len(self.sale_lines_items)
        self.sale_lines_items = [i for i in self.sale_lines_items if i["id"] != item_id]
        self.sale_lines_page = page_after_delete(self.sale_lines_page, items_on_page)
        failure = self._fetch_sale_lines()
        return failure or rx.toast("Sale item deleted.", duration=3000)

    # ------------------------------------------------------------------
    # Today's sale lines
    # ------------------------------------------------------------------

    def _fetch_daily(self):
        self.daily_error = ""
        try:
            result = SaleService.list_today_items(
                self._api(), page=self.daily_page, limit=self.daily_per_page
            )
        except ApiError as exc:
            self.daily_items = []
            return self._api_failure(exc, "daily", "Loading today's sales")
        self._apply_page("daily", result)

    @rx.event
    @require_login
    def load_daily_sales(self):
        return self._fetch_daily()

    @rx.event
    @require_login
    def daily_go_to_page(self, page: int):
        target = clamp_page(page, self.daily_total_pages)
        if target == self.daily_page:
            return
        self.daily_page = target
        return self._fetch_daily()
