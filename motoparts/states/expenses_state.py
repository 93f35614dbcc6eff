import datetime

import reflex as rx
from typing import Any, Dict, List

from pydantic import ValidationError

from motoparts.api.client import ApiError, ApiValidationError
from motoparts.constants import DEFAULT_ITEMS_PER_PAGE
from motoparts.schemas.account_schemas import ExpenseDTO
from motoparts.services.expense_service import ExpenseService
from motoparts.utils.formatting import parse_float_safe
from motoparts.utils.logger import get_logger
from motoparts.utils.pagination import clamp_page, page_after_delete, page_numbers
from motoparts.utils.sanitization import sanitize_description, sanitize_name, sanitize_search
from motoparts.utils.validators import validate_expense_form
from .mixin_state import MixinState, require_admin
from .types import ExpenseRow

logger = get_logger("ExpensesState")

EXPENSE_CATEGORIES: List[str] = [
    "Rent",
    "Utilities",
    "Salaries",
    "Transport",
    "Stock Purchase",
    "Maintenance",
    "Other",
]

SORTABLE_EXPENSE_FIELDS = ("date", "amount", "category", "description")

ADMIN_MESSAGE = "Only administrators can manage expenses."


def _empty_expense_form() -> Dict[str, Any]:
    return {
        "description": "",
        "amount": "",
        "category": "",
        "date": datetime.date.today().isoformat(),
    }


class ExpensesState(MixinState):
    expense_items: List[ExpenseRow] = []
    expense_page: int = 1
    expense_per_page: int = DEFAULT_ITEMS_PER_PAGE
    expense_total_items: int = 0
    expense_total_pages: int = 1
    expense_search: str = ""
    expense_sort_by: str = "date"
    expense_sort_order: str = "desc"
    expense_error: str = ""

    expense_modal_open: bool = False
    expense_editing_id: int = 0
    expense_form: Dict[str, Any] = _empty_expense_form()
    expense_errors: Dict[str, str] = {}
    expense_delete_id: int = 0

    @rx.var
    def expense_categories(self) -> List[str]:
        return EXPENSE_CATEGORIES

    @rx.var
    def expense_page_numbers(self) -> List[int]:
        return page_numbers(self.expense_page, self.expense_total_pages)

    def _fetch_expenses(self):
        self.expense_error = ""
        try:
            result = ExpenseService.list_expenses(
                self._api(),
                page=self.expense_page,
                limit=self.expense_per_page,
                search=self.expense_search,
                sort_by=self.expense_sort_by,
                sort_order=self.expense_sort_order,
            )
        except ApiError as exc:
            self.expense_items = []
            return self._api_failure(exc, "expense", "Loading expenses")
        self._apply_page("expense", result)

    @rx.event
    @require_admin(silent=True)
    def load_expenses(self):
        return self._fetch_expenses()

    @rx.event
    @require_admin(ADMIN_MESSAGE)
    def set_expense_search(self, value: str):
        self.expense_search = sanitize_search(value)
        self.expense_page = 1
        return self._fetch_expenses()

    @rx.event
    @require_admin(ADMIN_MESSAGE)
    def expense_go_to_page(self, page: int):
        target = clamp_page(page, self.expense_total_pages)
        if target == self.expense_page:
            return
        self.expense_page = target
        return self._fetch_expenses()

    @rx.event
    @require_admin(ADMIN_MESSAGE)
    def sort_expenses(self, field: str):
        if field not in SORTABLE_EXPENSE_FIELDS:
            return
        if field == self.expense_sort_by:
            self.expense_sort_order = "asc" if self.expense_sort_order == "desc" else "desc"
        else:
            self.expense_sort_by = field
            self.expense_sort_order = "desc"
        self.expense_page = 1
        return self._fetch_expenses()

    @rx.event
    def open_expense_modal(self, expense: dict | None = None):
        if isinstance(expense, dict) and expense.get("id"):
            self.expense_editing_id = int(expense["id"])
            self.expense_form = {
                "description": expense.get("description", ""),
                "amount": str(expense.get("amount", "")),
                "category": expense.get("category", ""),
                "date": expense.get("date", ""),
            }
        else:
            self.expense_editing_id = 0
            self.expense_form = _empty_expense_form()
        self.expense_errors = {}
        self.expense_modal_open = True

    @rx.event
    def close_expense_modal(self):
        self.expense_modal_open = False
        self.expense_editing_id = 0
        self.expense_form = _empty_expense_form()
        self.expense_errors = {}

    @rx.event
    def set_expense_field(self, field: str, value: str):
        if field not in self.expense_form:
            return
        self.expense_form = {**self.expense_form, field: value}

    @rx.event
    @require_admin(ADMIN_MESSAGE)
    def save_expense(self):
        form = {
            "description": sanitize_description(self.expense_form.get("description")),
            "amount": str(self.expense_form.get("amount") or "").strip(),
            "category": sanitize_name(self.expense_form.get("category")),
            "date": str(self.expense_form.get("date") or "").strip(),
        }
        errors = validate_expense_form(form)
        if errors:
            self.expense_errors = errors
            return
        try:
            dto = ExpenseDTO(
                description=form["description"],
                amount=parse_float_safe(form["amount"]),
                category=form["category"],
                date=form["date"],
            )
        except ValidationError as exc:
            logger.info("Expense form rejected: %s", exc)
            self.expense_errors = {"amount": "Please check the expense details."}
            return
        try:
            if self.expense_editing_id:
                ExpenseService.update_expense(self._api(), self.expense_editing_id, dto)
            else:
                ExpenseService.create_expense(self._api(), dto)
        except ApiValidationError as exc:
            self.expense_errors = dict(exc.field_errors)
            return
        except ApiError as exc:
            return self._api_failure(exc, context="Saving expense")
        message = "Expense updated." if self.expense_editing_id else "Expense added."
        self.close_expense_modal()
        failure = self._fetch_expenses()
        return failure or rx.toast(message, duration=3000)

    @rx.event
    def ask_delete_expense(self, expense_id: int):
        self.expense_delete_id = int(expense_id)

    @rx.event
    def cancel_delete_expense(self):
        self.expense_delete_id = 0

    @rx.event
    @require_admin(ADMIN_MESSAGE)
    def delete_expense(self):
        expense_id = self.expense_delete_id
        self.expense_delete_id = 0
        if not expense_id:
            return
        try:
            ExpenseService.delete_expense(self._api(), expense_id)
        except ApiError as exc:
            return self._api_failure(exc, context="Deleting expense")
        items_on_page = len(self.expense_items)
        self.expense_items = [e for e in self.expense_items if e["id"] != expense_id]
        self.expense_page = page_after_delete(self.expense_page, items_on_page)
        failure = self._fetch_expenses()
        return failure or rx.toast("Expense deleted.", duration=3000)
