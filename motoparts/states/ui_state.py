import reflex as rx
from typing import Dict, List

from motoparts.api.client import ApiError
from motoparts.services.product_service import ProductService
from motoparts.utils.auth import has_role
from motoparts.utils.logger import get_logger
from .mixin_state import MixinState, require_login

logger = get_logger("UIState")

NAVIGATION_ITEMS: List[Dict[str, str]] = [
    {"label": "Dashboard", "icon": "layout-dashboard", "route": "/", "section": "Overview"},
    {"label": "New Sale", "icon": "shopping-cart", "route": "/sales/new", "section": "Sales"},
    {"label": "Sales", "icon": "receipt", "route": "/sales", "section": "Sales"},
    {"label": "All Sale Items", "icon": "list", "route": "/all-sales", "section": "Sales"},
    {"label": "Today's Sales", "icon": "calendar-check", "route": "/daily-sales", "section": "Sales"},
    {"label": "Debtors", "icon": "book-open", "route": "/debtors", "section": "Sales"},
    {"label": "Products", "icon": "package", "route": "/products", "section": "Inventory"},
    {"label": "Low Stock", "icon": "triangle-alert", "route": "/low-stock", "section": "Inventory"},
    {"label": "Brands", "icon": "tag", "route": "/brands", "section": "Inventory"},
    {"label": "Shelf Codes", "icon": "archive", "route": "/shelf-code", "section": "Inventory"},
    {"label": "Compatible Models", "icon": "bike", "route": "/compatible-models", "section": "Inventory"},
    {"label": "Suppliers", "icon": "truck", "route": "/suppliers", "section": "Inventory"},
    {"label": "Reports", "icon": "chart-bar", "route": "/reports", "section": "Overview"},
    {"label": "Expenses", "icon": "wallet", "route": "/expenses", "section": "Admin", "admin": "1"},
    {"label": "Users", "icon": "users", "route": "/users", "section": "Admin", "admin": "1"},
]


class UIState(MixinState):
    sidebar_open: bool = True
    current_path: str = "/"
    low_stock_count: int = 0
    _low_stock_loaded: bool = False

    @rx.event
    def toggle_sidebar(self):
        self.sidebar_open = not self.sidebar_open

    def _navigation_for(self, is_admin: bool) -> List[Dict[str, str]]:
        return [
            {
                "label": item["label"],
                "icon": item["icon"],
                "route": item["route"],
                "section": item["section"],
            }
            for item in NAVIGATION_ITEMS
            if is_admin or not item.get("admin")
        ]

    @rx.var
    def navigation_items(self) -> List[Dict[str, str]]:
        return self._navigation_for(has_role(self.session_user["roles"], "ADMIN"))

    @rx.var
    def active_route(self) -> str:
        """Navigation entry matching the current path (``/sales/42`` -> ``/sales``)."""
        routes = sorted((item["route"] for item in NAVIGATION_ITEMS), key=len, reverse=True)
        for route in routes:
            if self.current_path == route:
                return route
        for route in routes:
            if route != "/" and self.current_path.startswith(f"{route}/"):
                return route
        return "/"

    def _refresh_low_stock_count(self):
        try:
            self.low_stock_count = len(ProductService.low_stock(self._api()))
        except ApiError as exc:
            logger.warning("Low stock count unavailable: %s", exc.message)
            return
        self._low_stock_loaded = True

    def _ensure_low_stock_count(self):
        if not self._low_stock_loaded:
            self._refresh_low_stock_count()

    @rx.event
    @require_login
    def refresh_low_stock_count(self):
        self._refresh_low_stock_count()
