"""
Product search and cart table shared by the new sale and the debtor
"add products to this sale" screens.
"""
import reflex as rx
from typing import Callable

from motoparts.components import INPUT_STYLES, TABLE_ROW_STYLE, data_table, icon_button, money, td
from motoparts.constants import SEARCH_DEBOUNCE_MS


def product_search_box(query: rx.Var, suggestions: rx.Var, on_search: Callable, on_pick: Callable) -> rx.Component:
    return rx.el.div(
        rx.el.div(
            rx.icon("search", class_name="h-4 w-4 text-gray-400 absolute left-3 top-1/2 -translate-y-1/2"),
            rx.debounce_input(
                rx.el.input(
                    placeholder="Search parts by name or SKU...",
                    value=query,
                    on_change=on_search,
                    class_name="w-full py-2 pl-9 pr-3 border rounded-md",
                ),
                debounce_timeout=SEARCH_DEBOUNCE_MS,
            ),
            class_name="relative",
        ),
        rx.cond(
            suggestions.length() > 0,
            rx.el.div(
                rx.foreach(
                    suggestions,
                    lambda p: rx.el.button(
                        rx.el.div(
                            rx.el.span(p["name"], class_name="font-medium text-gray-800"),
                            rx.el.span(
                                p["sku"], " · ", p["brand_name"], " · shelf ", p["shelf_code"],
                                class_name="text-xs text-gray-500",
                            ),
                            class_name="flex flex-col text-left",
                        ),
                        rx.el.div(
                            money(p["selling_price"], "font-semibold"),
                            rx.el.span(p["quantity_in_stock"].to_string(), " in stock", class_name="text-xs text-gray-500"),
                            class_name="flex flex-col items-end",
                        ),
                        on_click=lambda: on_pick(p),
                        type="button",
                        class_name="w-full flex justify-between items-center gap-4 px-4 py-2 hover:bg-indigo-50",
                    ),
                ),
                class_name="absolute z-20 mt-1 w-full bg-white border rounded-md shadow-lg max-h-80 overflow-y-auto",
            ),
            rx.fragment(),
        ),
        class_name="relative w-full",
    )


def _rate_input(value: rx.Var, on_change: Callable) -> rx.Component:
    return rx.el.input(
        type="number",
        min="0",
        max="100",
        value=value.to_string(),
        on_change=on_change,
        class_name=INPUT_STYLES["small"],
    )


def cart_table(items: rx.Var, on_quantity: Callable, on_discount: Callable, on_tax: Callable, on_remove: Callable) -> rx.Component:
    def row(item: rx.Var) -> rx.Component:
        pid = item["product_id"]
        return rx.el.tr(
            td(rx.el.div(
                rx.el.span(item["product_name"], class_name="font-medium"),
                rx.el.span(item["sku"], " · ", item["brand_name"], class_name="text-xs text-gray-500"),
                rx.el.span(item["compatible_models"], class_name="text-xs text-gray-400"),
                class_name="flex flex-col",
            )),
            td(item["shelf_code"]),
            td(rx.el.input(
                type="number",
                min="1",
                max=item["stock"].to_string(),
                value=item["quantity"].to_string(),
                on_change=lambda v: on_quantity(pid, v),
                class_name=INPUT_STYLES["small"],
            ), align="text-center"),
            td(money(item["unit_price"]), align="text-right"),
            td(_rate_input(item["discount"], lambda v: on_discount(pid, v)), align="text-center"),
            td(_rate_input(item["tax"], lambda v: on_tax(pid, v)), align="text-center"),
            td(money(item["total"], "font-semibold"), align="text-right"),
            td(icon_button("trash-2", lambda: on_remove(pid), "icon_danger", "Remove"), align="text-center"),
            class_name=TABLE_ROW_STYLE,
        )

    return data_table(
        headers=[
            ("Product", "text-left"),
            ("Shelf", "text-left"),
            ("Qty", "text-center"),
            ("Unit price", "text-right"),
            ("Discount %", "text-center"),
            ("Tax %", "text-center"),
            ("Total", "text-right"),
            ("", "text-center"),
        ],
        rows=rx.foreach(items, row),
        empty_message="Search for a part to add it to the cart.",
        has_data=items.length() > 0,
    )


def totals_panel(totals: rx.Var) -> rx.Component:
    def line(label: str, key: str, strong: bool = False) -> rx.Component:
        return rx.el.div(
            rx.el.span(label, class_name="text-gray-600"),
            money(totals[key], "font-bold text-lg" if strong else "font-medium"),
            class_name="flex justify-between",
        )

    return rx.el.div(
        line("Subtotal", "subtotal"),
        line("Discount", "discount"),
        line("Tax", "tax"),
        rx.el.hr(),
        line("Total", "total", strong=True),
        class_name="flex flex-col gap-2",
    )
