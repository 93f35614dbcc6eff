import reflex as rx

from motoparts.components import (
    INPUT_STYLES,
    action_button,
    app_layout,
    form_field,
    page_title,
)
from motoparts.components.ui import CARD_STYLES
from motoparts.state import State
from .cart_widgets import cart_table, product_search_box, totals_panel


def checkout_panel() -> rx.Component:
    return rx.el.div(
        rx.el.h2("Checkout", class_name="text-lg font-semibold text-gray-700"),
        form_field(
            "Customer",
            rx.el.input(
                placeholder="Walk-in Customer",
                value=State.customer_name,
                on_change=State.set_customer_name,
                class_name=INPUT_STYLES["default"],
            ),
        ),
        form_field(
            "Payment",
            rx.el.select(
                rx.foreach(State.payment_status_options, lambda s: rx.el.option(s, value=s)),
                value=State.payment_status,
                on_change=State.set_payment_status,
                class_name=INPUT_STYLES["default"],
            ),
        ),
        form_field(
            "Amount paid",
            rx.el.input(
                type="number",
                min="0",
                value=State.amount_paid,
                on_change=State.set_amount_paid,
                class_name=INPUT_STYLES["default"],
            ),
        ),
        totals_panel(State.cart_totals),
        rx.cond(
            State.checkout_error != "",
            rx.el.p(State.checkout_error, class_name="text-sm text-red-600"),
            rx.fragment(),
        ),
        action_button("Complete Sale", State.submit_sale, variant="success", icon="check", disabled=State.cart_is_empty),
        action_button("Clear Cart", State.clear_cart, variant="secondary", icon="x"),
        class_name=f"{CARD_STYLES['default']} flex flex-col gap-4",
    )


def new_sale_page() -> rx.Component:
    return app_layout(
        page_title("New Sale", "Add parts to the cart and check out"),
        rx.el.div(
            rx.el.div(
                product_search_box(
                    State.product_query,
                    State.product_suggestions,
                    State.search_products,
                    State.add_to_cart,
                ),
                cart_table(
                    State.cart_items,
                    State.set_cart_quantity,
                    State.set_cart_discount,
                    State.set_cart_tax,
                    State.remove_from_cart,
                ),
                class_name="flex flex-col gap-4 lg:col-span-2",
            ),
            checkout_panel(),
            class_name="grid grid-cols-1 lg:grid-cols-3 gap-6 items-start",
        ),
    )
