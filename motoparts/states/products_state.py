"""Products screen: paged list with search, add/edit modal, delete, low stock."""
import reflex as rx
from typing import Any, Dict, List

from pydantic import ValidationError

from motoparts.api.client import ApiError, ApiValidationError
from motoparts.constants import DEFAULT_ITEMS_PER_PAGE, LOW_STOCK_THRESHOLD
from motoparts.enums import CatalogKind
from motoparts.schemas.inventory_schemas import ProductDTO
from motoparts.services.catalog_service import CatalogService
from motoparts.services.product_service import ProductService
from motoparts.utils.formatting import parse_float_safe, parse_int_safe
from motoparts.utils.logger import get_logger
from motoparts.utils.pagination import clamp_page, page_after_delete, page_numbers
from motoparts.utils.sanitization import (
    sanitize_description,
    sanitize_name,
    sanitize_search,
    sanitize_sku,
)
from motoparts.utils.validators import validate_product_form
from .mixin_state import MixinState, require_login
from .types import CatalogEntry, ProductRow

logger = get_logger("ProductsState")

# Backend field names -> form field names
PRODUCT_FIELD_MAP = {
    "brandId": "brand_id",
    "shelfCodeId": "shelf_code_id",
    "compatibleModelIds": "compatible_model_ids",
    "quantityInStock": "quantity_in_stock",
    "purchasePrice": "purchase_price",
    "sellingPrice": "selling_price",
}


def _empty_product_form() -> Dict[str, Any]:
    return {
        "name": "",
        "sku": "",
        "description": "",
        "brand_id": "",
        "shelf_code_id": "",
        "compatible_model_ids": [],
        "quantity_in_stock": "0",
        "purchase_price": "",
        "selling_price": "",
    }


class ProductsState(MixinState):
    products_items: List[ProductRow] = []
    products_page: int = 1
    products_per_page: int = DEFAULT_ITEMS_PER_PAGE
    products_total_items: int = 0
    products_total_pages: int = 1
    products_search: str = ""
    products_error: str = ""

    product_modal_open: bool = False
    product_editing_id: int = 0
    product_form: Dict[str, Any] = _empty_product_form()
    product_errors: Dict[str, str] = {}
    product_delete_id: int = 0

    brand_options: List[CatalogEntry] = []
    shelf_options: List[CatalogEntry] = []
    model_options: List[CatalogEntry] = []

    low_stock_items: List[ProductRow] = []
    low_stock_error: str = ""

    @rx.var
    def products_page_numbers(self) -> List[int]:
        return page_numbers(self.products_page, self.products_total_pages)

    @rx.var
    def product_modal_title(self) -> str:
        return "Edit Product" if self.product_editing_id else "Add Product"

    @rx.var
    def selected_model_names(self) -> str:
        selected = set(self.product_form.get("compatible_model_ids", []))
        return ", ".join(m["name"] for m in self.model_options if m["id"] in selected)

    @rx.var
    def low_stock_threshold(self) -> int:
        return LOW_STOCK_THRESHOLD

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def _fetch_products(self):
        self.products_error = ""
        try:
            result = ProductService.list_products(
                self._api(),
                page=self.products_page,
                limit=self.products_per_page,
                name=self.products_search,
            )
        except ApiError as exc:
            self.products_items = []
            return self._api_failure(exc, "products", "Loading products")
        self._apply_page("products", result)

    @rx.event
    @require_login
    def load_products(self):
        return self._fetch_products()

    @rx.event
    @require_login
    def set_products_search(self, value: str):
        self.products_search = sanitize_search(value)
        self.products_page = 1
        return self._fetch_products()

    @rx.event
    @require_login
    def products_go_to_page(self, page: int):
        target = clamp_page(page, self.products_total_pages)
        if target == self.products_page:
            return
        self.products_page = target
        return self._fetch_products()

    # ------------------------------------------------------------------
    # Add / edit
    # ------------------------------------------------------------------

    def _load_product_options(self):
        client = self._api()
        self.brand_options = CatalogService.list_entries(client, CatalogKind.BRANDS.value)
        self.shelf_options = CatalogService.list_entries(client, CatalogKind.SHELF_CODES.value)
        self.model_options = CatalogService.list_entries(client, CatalogKind.COMPATIBLE_MODELS.value)

    @rx.event
    @require_login
    def open_product_modal(self, product: dict | None = None):
        try:
            self._load_product_options()
        except ApiError as exc:
            return self._api_failure(exc, context="Loading product options")
        if isinstance(product, dict) and product.get("id"):
            self.product_editing_id = int(product["id"])
            self.product_form = {
                "name": product.get("name", ""),
                "sku": product.get("sku", ""),
                "description": product.get("description", ""),
                "brand_id": str(product.get("brand_id") or ""),
                "shelf_code_id": str(product.get("shelf_code_id") or ""),
                "compatible_model_ids": list(product.get("compatible_model_ids") or []),
                "quantity_in_stock": str(product.get("quantity_in_stock", 0)),
                "purchase_price": str(product.get("purchase_price", "")),
                "selling_price": str(product.get("selling_price", "")),
            }
        else:
            self.product_editing_id = 0
            self.product_form = _empty_product_form()
        self.product_errors = {}
        self.product_modal_open = True

    @rx.event
    def close_product_modal(self):
        self.product_modal_open = False
        self.product_editing_id = 0
        self.product_form = _empty_product_form()
        self.product_errors = {}

    @rx.event
    def set_product_field(self, field: str, value: Any):
        if field not in self.product_form:
            return
        self.product_form = {**self.product_form, field: value}
        if field in self.product_errors:
            self.product_errors = {k: v for k, v in self.product_errors.items() if k != field}

    @rx.event
    def toggle_product_model(self, model_id: int):
        selected = list(self.product_form.get("compatible_model_ids", []))
        model_id = int(model_id)
        if model_id in selected:
            selected.remove(model_id)
        else:
            selected.append(model_id)
        self.product_form = {**self.product_form, "compatible_model_ids": selected}

    def _product_dto(self) -> ProductDTO:
        form = self.product_form
        shelf_id = parse_int_safe(form.get("shelf_code_id"), 0)
        return ProductDTO(
            name=sanitize_name(form.get("name")),
            sku=sanitize_sku(form.get("sku")),
            description=sanitize_description(form.get("description")),
            brand_id=parse_int_safe(form.get("brand_id"), 0),
            shelf_code_id=shelf_id or None,
            compatible_model_ids=[int(i) for i in form.get("compatible_model_ids", [])],
            quantity_in_stock=parse_int_safe(form.get("quantity_in_stock"), 0),
            purchase_price=parse_float_safe(form.get("purchase_price"), 0.0),
            selling_price=parse_float_safe(form.get("selling_price"), 0.0),
        )

    @rx.event
    @require_login
    def save_product(self):
        errors = validate_product_form(self.product_form)
        if errors:
            self.product_errors = errors
            return
        try:
            dto = self._product_dto()
        except ValidationError as exc:
            logger.info("Product form rejected: %s", exc)
            self.product_errors = {"name": "Please check the product details."}
            return
        try:
            if self.product_editing_id:
                ProductService.update_product(self._api(), self.product_editing_id, dto)
            else:
                ProductService.create_product(self._api(), dto)
        except ApiValidationError as exc:
            self.product_errors = {
                PRODUCT_FIELD_MAP.get(field, field): message
                for field, message in exc.field_errors.items()
            }
            return
        except ApiError as exc:
            return self._api_failure(exc, context="Saving product")
        message = "Product updated." if self.product_editing_id else "Product added."
        self.close_product_modal()
        if hasattr(self, "_refresh_low_stock_count"):
            self._refresh_low_stock_count()
        failure = self._fetch_products()
        return failure or rx.toast(message, duration=3000)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    @rx.event
    def ask_delete_product(self, product_id: int):
        self.product_delete_id = int(product_id)

    @rx.event
    def cancel_delete_product(self):
        self.product_delete_id = 0

    @rx.event
    @require_login
    def delete_product(self):
        product_id = self.product_delete_id
        self.product_delete_id = 0
        if not product_id:
            return
        try:
            ProductService.delete_product(self._api(), product_id)
        except ApiError as exc:
            return self._api_failure(exc, context="Deleting product")
        items_on_page = len(self.products_items)
        self.products_items = [p for p in self.products_items if p["id"] != product_id]
        self.products_page = page_after_delete(self.products_page, items_on_page)
        if hasattr(self, "_refresh_low_stock_count"):
            self._refresh_low_stock_count()
        failure = self._fetch_products()
        return failure or rx.toast("Product deleted.", duration=3000)

    # ------------------------------------------------------------------
    # Low stock
    # ------------------------------------------------------------------

    @rx.event
    @require_login
    def load_low_stock(self):
        self.low_stock_error = ""
        try:
            self.low_stock_items = ProductService.low_stock(self._api())
        except ApiError as exc:
            self.low_stock_items = []
            return self._api_failure(exc, "low_stock", "Loading low stock")
        if hasattr(self, "low_stock_count"):
            self.low_stock_count = len(self.low_stock_items)
