import reflex as rx

from motoparts.components import (
    TABLE_ROW_STYLE,
    action_button,
    app_layout,
    data_table,
    error_banner,
    money,
    page_title,
    payment_badge,
    td,
)
from motoparts.components.ui import CARD_STYLES
from motoparts.state import State


def _summary_item(label: str, value: rx.Component) -> rx.Component:
    return rx.el.div(
        rx.el.span(label, class_name="text-xs uppercase text-gray-500"),
        rx.el.div(value, class_name="text-base font-semibold text-gray-800"),
        class_name="flex flex-col gap-1",
    )


def sale_detail_page() -> rx.Component:
    sale = State.sale_detail
    return app_layout(
        page_title(
            "Sale #" + sale["id"].to_string(),
            actions=[
                action_button("Back", rx.redirect("/sales"), variant="secondary_sm", icon="arrow-left"),
                action_button("Invoice PDF", State.download_invoice, variant="primary_sm", icon="file-down"),
            ],
        ),
        error_banner(State.sale_detail_error, State.load_sale_detail),
        rx.el.div(
            _summary_item("Customer", sale["customer_name"]),
            _summary_item("Date", sale["created_at"]),
            _summary_item("Status", payment_badge(sale["payment_status"])),
            _summary_item("Total", money(sale["total_amount"])),
            _summary_item("Paid", money(sale["paid_amount"])),
            _summary_item("Balance", money(State.sale_detail_balance)),
            class_name=f"{CARD_STYLES['default']} grid grid-cols-2 md:grid-cols-3 gap-4",
        ),
        data_table(
            headers=[
                ("Product", "text-left"),
                ("SKU", "text-left"),
                ("Qty", "text-center"),
                ("Unit price", "text-right"),
                ("Total", "text-right"),
                ("Paid", "text-center"),
            ],
            rows=rx.foreach(
                sale["items"],
                lambda item: rx.el.tr(
                    td(item["product_name"], align="text-left font-medium"),
                    td(item["sku"]),
                    td(item["quantity_sold"].to_string(), align="text-center"),
                    td(money(item["unit_price"]), align="text-right"),
                    td(money(item["total_price"]), align="text-right"),
                    td(
                        rx.cond(
                            item["paid"],
                            rx.icon("circle-check", class_name="h-4 w-4 text-emerald-600 inline"),
                            rx.icon("circle", class_name="h-4 w-4 text-gray-300 inline"),
                        ),
                        align="text-center",
                    ),
                    class_name=TABLE_ROW_STYLE,
                ),
            ),
            empty_message="This sale has no items.",
            has_data=sale["items"].length() > 0,
        ),
    )
