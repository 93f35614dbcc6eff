import reflex as rx

from motoparts.components import (
    INPUT_STYLES,
    TABLE_ROW_STYLE,
    action_button,
    app_layout,
    error_banner,
    money,
    page_title,
    pagination_controls,
    payment_badge,
    td,
)
from motoparts.components.ui import TABLE_HEADER_STYLE, empty_state
from motoparts.state import State


def _sort_header(label: str, field: str, align: str = "text-left") -> rx.Component:
    return rx.el.th(
        rx.el.button(
            label,
            rx.cond(
                State.sales_sort_by == field,
                rx.cond(
                    State.sales_sort_direction == "asc",
                    rx.icon("arrow-up", class_name="h-3 w-3"),
                    rx.icon("arrow-down", class_name="h-3 w-3"),
                ),
                rx.icon("arrow-up-down", class_name="h-3 w-3 text-gray-400"),
            ),
            on_click=lambda: State.sort_sales(field),
            class_name="flex items-center gap-1 font-semibold",
        ),
        class_name=f"py-3 px-4 {align}",
    )


def _sale_row(sale: rx.Var) -> rx.Component:
    return rx.el.tr(
        td(rx.el.a("#", sale["id"].to_string(), href=f"/sales/{sale['id']}", class_name="text-indigo-600 font-medium hover:underline")),
        td(sale["created_at"]),
        td(sale["customer_name"]),
        td(sale["quantity"].to_string(), align="text-center"),
        td(money(sale["total_amount"], "font-semibold"), align="text-right"),
        td(money(sale["paid_amount"]), align="text-right"),
        td(payment_badge(sale["payment_status"]), align="text-center"),
        class_name=TABLE_ROW_STYLE,
    )


def sales_page() -> rx.Component:
    return app_layout(
        page_title(
            "Sales",
            "Every checkout, newest first",
            actions=[action_button("New Sale", rx.redirect("/sales/new"), icon="plus")],
        ),
        error_banner(State.sales_error, State.load_sales),
        rx.el.div(
            rx.el.label("Payment status", class_name="text-sm text-gray-600"),
            rx.el.select(
                rx.el.option("All", value="ALL"),
                rx.el.option("Paid", value="PAID"),
                rx.el.option("Unpaid", value="UNPAID"),
                rx.el.option("Partial", value="PARTIAL"),
                value=rx.cond(State.sales_status_filter == "", "ALL", State.sales_status_filter),
                on_change=State.set_sales_status_filter,
                class_name=INPUT_STYLES["default"] + " sm:w-48",
            ),
            class_name="flex items-center gap-3",
        ),
        rx.el.div(
            rx.el.table(
                rx.el.thead(
                    rx.el.tr(
                        rx.el.th("Sale", class_name="py-3 px-4 text-left"),
                        _sort_header("Date", "createdAt"),
                        _sort_header("Customer", "customerName"),
                        rx.el.th("Items", class_name="py-3 px-4 text-center"),
                        _sort_header("Total", "totalAmountSummary", "text-right"),
                        rx.el.th("Paid", class_name="py-3 px-4 text-right"),
                        _sort_header("Status", "paymentStatus", "text-center"),
                        class_name=TABLE_HEADER_STYLE,
                    )
                ),
                rx.el.tbody(rx.foreach(State.sales_items, _sale_row)),
                class_name="w-full text-sm",
            ),
            rx.cond(State.sales_items.length() > 0, rx.fragment(), empty_state("No sales recorded.")),
            class_name="bg-white p-4 sm:p-6 rounded-lg shadow-md overflow-x-auto",
        ),
        pagination_controls(
            State.sales_page,
            State.sales_total_pages,
            State.sales_page_numbers,
            State.sales_go_to_page,
        ),
    )
