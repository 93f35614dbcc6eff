from typing import Any, Dict, List, Tuple

import reflex as rx

from motoparts.utils.calculations import (
    add_cart_line,
    calculate_cart_totals,
    remove_cart_line,
    set_cart_line_quantity,
    set_cart_line_rate,
)
from motoparts.utils.formatting import parse_float_safe, parse_int_safe
from ..types import ProductRow, SaleCartItem

CartLines = List[Dict[str, Any]]


def cart_line_from_product(product: Dict[str, Any], quantity: int = 1) -> Dict[str, Any]:
    return {
        "product_id": product.get("id"),
        "product_name": product.get("name", ""),
        "sku": product.get("sku", ""),
        "shelf_code": product.get("shelf_code", ""),
        "brand_name": product.get("brand_name", ""),
        "compatible_models": product.get("compatible_models", ""),
        "quantity": quantity,
        "unit_price": float(product.get("selling_price", 0) or 0),
        "discount": 0.0,
        "tax": 0.0,
        "total": 0.0,
        "stock": int(product.get("quantity_in_stock", 0) or 0),
    }


def _line(items: CartLines, product_id: Any) -> Dict[str, Any] | None:
    return next((item for item in items if item.get("product_id") == product_id), None)


def add_product(items: CartLines, product: Dict[str, Any]) -> Tuple[CartLines, str]:
    """
    Adds one unit of a product, refusing to go past the stock on hand.

    Returns:
        (new cart, error message or "")
    """
    stock = int(product.get("quantity_in_stock", 0) or 0)
    existing = _line(items, product.get("id"))
    in_cart = int(existing["quantity"]) if existing else 0
    if stock <= 0:
        return items, f"{product.get('name', 'This product')} is out of stock."
    if in_cart + 1 > stock:
        return items, f"Only {stock} units of {product.get('name', 'this product')} in stock."
    return add_cart_line(items, cart_line_from_product(product)), ""


def change_quantity(items: CartLines, product_id: Any, value: Any) -> Tuple[CartLines, str]:
    quantity = parse_int_safe(value, 0)
    if quantity <= 0:
        return items, ""
    existing = _line(items, product_id)
    if existing is None:
        return items, ""
    stock = int(existing.get("stock", 0) or 0)
    if stock and quantity > stock:
        return items, f"Only {stock} units of {existing['product_name']} in stock."
    return set_cart_line_quantity(items, product_id, quantity), ""


def change_rate(items: CartLines, product_id: Any, field: str, value: Any) -> CartLines:
    return set_cart_line_rate(items, product_id, field, parse_float_safe(value, 0.0))


def totals_view(items: CartLines) -> Dict[str, float]:
    return {key: float(value) for key, value in calculate_cart_totals(items).items()}


class CartMixin:
    cart_items: List[SaleCartItem] = []
    product_query: str = ""
    product_suggestions: List[ProductRow] = []

    @rx.var
    def cart_totals(self) -> Dict[str, float]:
        return totals_view(self.cart_items)

    @rx.var
    def cart_is_empty(self) -> bool:
        return len(self.cart_items) == 0

    def _reset_cart(self):
        self.cart_items = []
        self.product_query = ""
        self.product_suggestions = []

    @rx.event
    def search_products(self, value: str):
        self.product_query = value or ""
        self.product_suggestions, failure = self._search_products(value)
        return failure

    @rx.event
    def add_to_cart(self, product: dict):
        items, error = add_product(self.cart_items, product)
        if error:
            return rx.toast(error, duration=3000)
        self.cart_items = items
        self.product_query = ""
        self.product_suggestions = []

    @rx.event
    def remove_from_cart(self, product_id: int):
        self.cart_items = remove_cart_line(self.cart_items, product_id)

    @rx.event
    def set_cart_quantity(self, product_id: int, value: str):
        items, error = change_quantity(self.cart_items, product_id, value)
        if error:
            return rx.toast(error, duration=3000)
        self.cart_items = items

    @rx.event
    def set_cart_discount(self, product_id: int, value: str):
        self.cart_items = change_rate(self.cart_items, product_id, "discount", value)

    @rx.event
    def set_cart_tax(self, product_id: int, value: str):
        self.cart_items = change_rate(self.cart_items, product_id, "tax", value)

    @rx.event
    def clear_cart(self):
        self._reset_cart()
