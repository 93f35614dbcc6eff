"""Suppliers - purchase contacts, paged and searched on the server."""
import reflex as rx
from typing import Any, Dict, List

from pydantic import ValidationError

from motoparts.api.client import ApiError, ApiValidationError
from motoparts.constants import DEFAULT_ITEMS_PER_PAGE
from motoparts.schemas.inventory_schemas import SupplierDTO
from motoparts.services.catalog_service import CatalogService
from motoparts.utils.logger import get_logger
from motoparts.utils.pagination import clamp_page, page_after_delete, page_numbers
from motoparts.utils.sanitization import (
    sanitize_address,
    sanitize_email,
    sanitize_name,
    sanitize_phone,
    sanitize_search,
)
from motoparts.utils.validators import validate_supplier_form
from .mixin_state import MixinState, require_login
from .types import SupplierRow

logger = get_logger("SuppliersState")

SUPPLIER_FIELD_MAP = {
    "contactPerson": "name",
    "company": "company_name",
    "phoneNumber": "phone",
}


def _empty_supplier_form() -> Dict[str, Any]:
    return {
        "name": "",
        "company_name": "",
        "phone": "",
        "email": "",
        "address": "",
    }


class SuppliersState(MixinState):
    supplier_items: List[SupplierRow] = []
    supplier_page: int = 1
    supplier_per_page: int = DEFAULT_ITEMS_PER_PAGE
    supplier_total_items: int = 0
    supplier_total_pages: int = 1
    supplier_search: str = ""
    supplier_error: str = ""

    supplier_modal_open: bool = False
    supplier_editing_id: int = 0
    supplier_form: Dict[str, Any] = _empty_supplier_form()
    supplier_errors: Dict[str, str] = {}
    supplier_delete_id: int = 0

    @rx.var
    def supplier_page_numbers(self) -> List[int]:
        return page_numbers(self.supplier_page, self.supplier_total_pages)

    def _fetch_suppliers(self):
        self.supplier_error = ""
        try:
            result = CatalogService.list_suppliers(
                self._api(),
                page=self.supplier_page,
                limit=self.supplier_per_page,
                search=self.supplier_search,
            )
        except ApiError as exc:
            self.supplier_items = []
            return self._api_failure(exc, "supplier", "Loading suppliers")
        self._apply_page("supplier", result)

    @rx.event
    @require_login
    def load_suppliers(self):
        return self._fetch_suppliers()

    @rx.event
    @require_login
    def set_supplier_search(self, value: str):
        self.supplier_search = sanitize_search(value)
        self.supplier_page = 1
        return self._fetch_suppliers()

    @rx.event
    @require_login
    def supplier_go_to_page(self, page: int):
        target = clamp_page(page, self.supplier_total_pages)
        if target == self.supplier_page:
            return
        self.supplier_page = target
        return self._fetch_suppliers()

    @rx.event
    def open_supplier_modal(self, supplier: dict | None = None):
        if isinstance(supplier, dict) and supplier.get("id"):
            self.supplier_editing_id = int(supplier["id"])
            self.supplier_form = {key: supplier.get(key, "") or "" for key in _empty_supplier_form()}
        else:
            self.supplier_editing_id = 0
            self.supplier_form = _empty_supplier_form()
        self.supplier_errors = {}
        self.supplier_modal_open = True

    @rx.event
    def close_supplier_modal(self):
        self.supplier_modal_open = False
        self.supplier_editing_id = 0
        self.supplier_form = _empty_supplier_form()
        self.supplier_errors = {}

    @rx.event
    def set_supplier_field(self, field: str, value: str):
        if field not in self.supplier_form:
            return
        self.supplier_form = {**self.supplier_form, field: value}

    @rx.event
    @require_login
    def save_supplier(self):
        form = {
            "name": sanitize_name(self.supplier_form.get("name")),
            "company_name": sanitize_name(self.supplier_form.get("company_name")),
            "phone": sanitize_phone(self.supplier_form.get("phone")),
            "email": sanitize_email(self.supplier_form.get("email")),
            "address": sanitize_address(self.supplier_form.get("address")),
        }
        errors = validate_supplier_form(form)
        if errors:
            self.supplier_errors = errors
            return
        try:
            dto = SupplierDTO(**form)
        except ValidationError as exc:
            logger.info("Supplier form rejected: %s", exc)
            self.supplier_errors = {"name": "Please check the supplier details."}
            return
        try:
            CatalogService.save_supplier(self._api(), dto, self.supplier_editing_id or None)
        except ApiValidationError as exc:
            self.supplier_errors = {
                SUPPLIER_FIELD_MAP.get(field, field): message
                for field, message in exc.field_errors.items()
            }
            return
        except ApiError as exc:
            return self._api_failure(exc, context="Saving supplier")
        message = "Supplier updated." if self.supplier_editing_id else "Supplier added."
        self.close_supplier_modal()
        failure = self._fetch_suppliers()
        return failure or rx.toast(message, duration=3000)

    @rx.event
    def ask_delete_supplier(self, supplier_id: int):
        self.supplier_delete_id = int(supplier_id)

    @rx.event
    def cancel_delete_supplier(self):
        self.supplier_delete_id = 0

    @rx.event
    @require_login
    def delete_supplier(self):
        supplier_id = self.supplier_delete_id
        self.supplier_delete_id = 0
        if not supplier_id:
            return
        try:
            CatalogService.delete_supplier(self._api(), supplier_id)
        except ApiError as exc:
            return self._api_failure(exc, context="Deleting supplier")
        items_on_page = len(self.supplier_items)
        self.supplier_items = [s for s in self.supplier_items if s["id"] != supplier_id]
        self.supplier_page = page_after_delete(self.supplier_page, items_on_page)
        failure = self._fetch_suppliers()
        return failure or rx.toast("Supplier deleted.", duration=3000)
