"""Brands, shelf codes and compatible models.

The three screens share this state; the catalog shown follows the route.
Lists are small, so search and paging happen on the client.
"""
import reflex as rx
from typing import Dict, List

from motoparts.api.client import ApiError, ApiValidationError
from motoparts.constants import DEFAULT_ITEMS_PER_PAGE
from motoparts.enums import CatalogKind
from motoparts.services.catalog_service import CATALOG_LABELS, CatalogService
from motoparts.utils.pagination import (
    clamp_page,
    count_pages,
    page_after_delete,
    page_numbers,
    slice_page,
)
from motoparts.utils.sanitization import sanitize_description, sanitize_name, sanitize_search
from .mixin_state import MixinState, require_login
from .types import CatalogEntry

ROUTE_KINDS: Dict[str, str] = {
    "/brands": CatalogKind.BRANDS.value,
    "/shelf-code": CatalogKind.SHELF_CODES.value,
    "/compatible-models": CatalogKind.COMPATIBLE_MODELS.value,
}

CATALOG_TITLES: Dict[str, str] = {
    CatalogKind.BRANDS.value: "Brands",
    CatalogKind.SHELF_CODES.value: "Shelf Codes",
    CatalogKind.COMPATIBLE_MODELS.value: "Compatible Models",
}


def filter_entries(entries: List[Dict], term: str) -> List[Dict]:
    term = (term or "").strip().lower()
    if not term:
        return list(entries)
    return [
        e for e in entries
        if term in e.get("name", "").lower() or term in e.get("description", "").lower()
    ]


class CatalogState(MixinState):
    catalog_kind: str = CatalogKind.BRANDS.value
    catalog_items: List[CatalogEntry] = []
    catalog_search: str = ""
    catalog_page: int = 1
    catalog_per_page: int = DEFAULT_ITEMS_PER_PAGE
    catalog_error: str = ""

    catalog_modal_open: bool = False
    catalog_editing_id: int = 0
    catalog_form: Dict[str, str] = {"name": "", "description": ""}
    catalog_errors: Dict[str, str] = {}
    catalog_delete_id: int = 0

    @rx.var
    def catalog_title(self) -> str:
        return CATALOG_TITLES.get(self.catalog_kind, "")

    @rx.var
    def catalog_label(self) -> str:
        return CATALOG_LABELS.get(self.catalog_kind, "")

    @rx.var
    def catalog_has_description(self) -> bool:
        return self.catalog_kind == CatalogKind.BRANDS.value

    @rx.var
    def catalog_total_pages(self) -> int:
        return count_pages(len(filter_entries(self.catalog_items, self.catalog_search)), self.catalog_per_page)

    @rx.var
    def catalog_page_items(self) -> List[CatalogEntry]:
        filtered = filter_entries(self.catalog_items, self.catalog_search)
        return slice_page(filtered, self.catalog_page, self.catalog_per_page)

    @rx.var
    def catalog_page_numbers(self) -> List[int]:
        return page_numbers(self.catalog_page, self.catalog_total_pages)

    def _fetch_catalog(self):
        self.catalog_error = ""
        try:
            self.catalog_items = CatalogService.list_entries(self._api(), self.catalog_kind)
        except ApiError as exc:
            self.catalog_items = []
            return self._api_failure(exc, "catalog", f"Loading {self.catalog_kind}")

    @rx.event
    @require_login
    def load_catalog(self):
        kind = ROUTE_KINDS.get(self._current_path(), CatalogKind.BRANDS.value)
        if kind != self.catalog_kind:
            self.catalog_search = ""
            self.catalog_page = 1
        self.catalog_kind = kind
        return self._fetch_catalog()

    @rx.event
    def set_catalog_search(self, value: str):
        self.catalog_search = sanitize_search(value)
        self.catalog_page = 1

    @rx.event
    def catalog_go_to_page(self, page: int):
        filtered = filter_entries(self.catalog_items, self.catalog_search)
        self.catalog_page = clamp_page(page, count_pages(len(filtered), self.catalog_per_page))

    @rx.event
    def open_catalog_modal(self, entry: dict | None = None):
        if isinstance(entry, dict) and entry.get("id"):
            self.catalog_editing_id = int(entry["id"])
            self.catalog_form = {
                "name": entry.get("name", ""),
                "description": entry.get("description", ""),
            }
        else:
            self.catalog_editing_id = 0
            self.catalog_form = {"name": "", "description": ""}
        self.catalog_errors = {}
        self.catalog_modal_open = True

    @rx.event
    def close_catalog_modal(self):
        self.catalog_modal_open = False
        self.catalog_editing_id = 0
        self.catalog_form = {"name": "", "description": ""}
        self.catalog_errors = {}

    @rx.event
    def set_catalog_field(self, field: str, value: str):
        self.catalog_form = {**self.catalog_form, field: value}

    @rx.event
    @require_login
    def save_catalog_entry(self):
        name = sanitize_name(self.catalog_form.get("name"))
        description = sanitize_description(self.catalog_form.get("description"))
        if not name:
            self.catalog_errors = {"name": f"{CATALOG_LABELS[self.catalog_kind]} name is required."}
            return
        try:
            if self.catalog_editing_id:
                CatalogService.update_entry(
                    self._api(), self.catalog_kind, self.catalog_editing_id, name, description
                )
            else:
                CatalogService.create_entry(self._api(), self.catalog_kind, name, description)
        except ApiValidationError as exc:
            self.catalog_errors = {
                ("name" if field in ("code", "name") else field): message
                for field, message in exc.field_errors.items()
            }
            return
        except ApiError as exc:
            return self._api_failure(exc, context=f"Saving {self.catalog_kind}")
        label = CATALOG_LABELS[self.catalog_kind]
        message = f"{label} updated." if self.catalog_editing_id else f"{label} added."
        self.close_catalog_modal()
        failure = self._fetch_catalog()
        return failure or rx.toast(message, duration=3000)

    @rx.event
    def ask_delete_catalog_entry(self, entry_id: int):
        self.catalog_delete_id = int(entry_id)

    @rx.event
    def cancel_delete_catalog_entry(self):
        self.catalog_delete_id = 0

    @rx.event
    @require_login
    def delete_catalog_entry(self):
        entry_id = self.catalog_delete_id
        self.catalog_delete_id = 0
        if not entry_id:
            return
        try:
            CatalogService.delete_entry(self._api(), self.catalog_kind, entry_id)
        except ApiError as exc:
            return self._api_failure(exc, context=f"Deleting {self.catalog_kind}")
        items_on_page = len(
            slice_page(
                filter_entries(self.catalog_items, self.catalog_search),
                self.catalog_page,
                self.catalog_per_page,
            )
        )
        self.catalog_items = [e for e in self.catalog_items if e["id"] != entry_id]
        self.catalog_page = page_after_delete(self.catalog_page, items_on_page)
        failure = self._fetch_catalog()
        return failure or rx.toast(f"{CATALOG_LABELS[self.catalog_kind]} deleted.", duration=3000)
