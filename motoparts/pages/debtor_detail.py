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
from .cart_widgets import cart_table, product_search_box, totals_panel


def _item_row(item: rx.Var) -> rx.Component:
    return rx.el.tr(
        td(item["product_name"], align="text-left font-medium"),
        td(item["quantity_sold"].to_string(), align="text-center"),
        td(money(item["unit_price"]), align="text-right"),
        td(money(item["total_price"]), align="text-right"),
        td(
            rx.cond(
                item["paid"],
                rx.el.span("Paid", class_name="text-xs font-semibold text-emerald-700"),
                action_button("Pay", lambda: State.pay_item(item["product_id"]), variant="success_sm", icon="check"),
            ),
            align="text-center",
        ),
        class_name=TABLE_ROW_STYLE,
    )


def debtor_detail_page() -> rx.Component:
    sale = State.debtor_sale
    return app_layout(
        page_title(
            "Sale #" + sale["id"].to_string(),
            sale["customer_name"],
            actions=[
                action_button("Back", rx.redirect("/debtors"), variant="secondary_sm", icon="arrow-left"),
                action_button(
                    "Pay All",
                    State.pay_all,
                    variant="success",
                    icon="badge-check",
                    disabled=sale["payment_status"] == "PAID",
                ),
            ],
        ),
        error_banner(State.debtor_sale_error, State.load_debtor_sale),
        rx.el.div(
            rx.el.div(payment_badge(sale["payment_status"])),
            rx.el.div(rx.el.span("Total ", class_name="text-gray-500"), money(sale["total_amount"], "font-semibold")),
            rx.el.div(rx.el.span("Paid ", class_name="text-gray-500"), money(sale["paid_amount"], "font-semibold")),
            rx.el.div(rx.el.span("Balance ", class_name="text-gray-500"), money(State.debtor_sale_balance, "font-bold text-red-600")),
            class_name=f"{CARD_STYLES['default']} flex flex-wrap items-center gap-6",
        ),
        data_table(
            headers=[
                ("Product", "text-left"),
                ("Qty", "text-center"),
                ("Unit price", "text-right"),
                ("Total", "text-right"),
                ("Payment", "text-center"),
            ],
            rows=rx.foreach(sale["items"], _item_row),
            empty_message="This sale has no items.",
            has_data=sale["items"].length() > 0,
        ),
        rx.el.div(
            rx.el.h2("Add products to this sale", class_name="text-lg font-semibold text-gray-700"),
            product_search_box(
                State.debtor_product_query,
                State.debtor_suggestions,
                State.search_debtor_products,
                State.add_debtor_product,
            ),
            cart_table(
                State.debtor_cart_items,
                State.set_debtor_quantity,
                State.set_debtor_discount,
                State.set_debtor_tax,
                State.remove_debtor_product,
            ),
            rx.el.div(
                rx.el.div(totals_panel(State.debtor_cart_totals), class_name="w-full sm:w-72"),
                action_button(
                    "Add to Sale",
                    State.submit_debtor_products,
                    icon="plus",
                    disabled=State.debtor_cart_items.length() == 0,
                ),
                class_name="flex flex-col sm:flex-row justify-between items-end gap-4",
            ),
            class_name=f"{CARD_STYLES['default']} flex flex-col gap-4",
        ),
    )
