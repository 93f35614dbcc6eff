import reflex as rx

from motoparts.components import (
    TABLE_ROW_STYLE,
    action_button,
    app_layout,
    data_table,
    error_banner,
    money,
    page_title,
    stock_badge,
    td,
)
from motoparts.state import State


def _low_stock_row(product: rx.Var) -> rx.Component:
    return rx.el.tr(
        td(product["name"], align="text-left font-medium"),
        td(product["sku"]),
        td(product["brand_name"]),
        td(product["shelf_code"]),
        td(product["quantity_in_stock"].to_string(), align="text-center font-bold"),
        td(stock_badge(product["stock_level"]), align="text-center"),
        td(money(product["purchase_price"]), align="text-right"),
        class_name=TABLE_ROW_STYLE,
    )


def low_stock_page() -> rx.Component:
    return app_layout(
        page_title(
            "Low Stock",
            "Products that need restocking",
            actions=[action_button("Refresh", State.load_low_stock, variant="secondary_sm", icon="refresh-cw")],
        ),
        rx.el.p(
            "Showing products with ",
            State.low_stock_threshold.to_string(),
            " units or fewer.",
            class_name="text-sm text-gray-600",
        ),
        error_banner(State.low_stock_error, State.load_low_stock),
        data_table(
            headers=[
                ("Product", "text-left"),
                ("SKU", "text-left"),
                ("Brand", "text-left"),
                ("Shelf", "text-left"),
                ("Stock", "text-center"),
                ("Status", "text-center"),
                ("Purchase price", "text-right"),
            ],
            rows=rx.foreach(State.low_stock_items, _low_stock_row),
            empty_message="Every product is well stocked.",
            has_data=State.low_stock_items.length() > 0,
        ),
    )
