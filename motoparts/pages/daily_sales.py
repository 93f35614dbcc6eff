import reflex as rx

from motoparts.components import (
    TABLE_ROW_STYLE,
    action_button,
    app_layout,
    data_table,
    error_banner,
    money,
    page_title,
    pagination_controls,
    stat_card,
    td,
)
from motoparts.state import State


def daily_sales_page() -> rx.Component:
    return app_layout(
        page_title(
            "Today's Sales",
            actions=[action_button("Refresh", State.load_daily_sales, variant="secondary_sm", icon="refresh-cw")],
        ),
        error_banner(State.daily_error, State.load_daily_sales),
        rx.el.div(
            stat_card("banknote", "Revenue on this page", money(State.daily_totals["revenue"]), "text-emerald-600"),
            stat_card("trending-up", "Profit on this page", money(State.daily_totals["profit"]), "text-indigo-600"),
            stat_card("list", "Items sold today", State.daily_total_items.to_string(), "text-sky-600"),
            class_name="grid grid-cols-1 sm:grid-cols-3 gap-4",
        ),
        data_table(
            headers=[
                ("Time", "text-left"),
                ("Product", "text-left"),
                ("Qty", "text-center"),
                ("Unit price", "text-right"),
                ("Total", "text-right"),
                ("Profit", "text-right"),
            ],
            rows=rx.foreach(
                State.daily_items,
                lambda item: rx.el.tr(
                    td(item["created_at"]),
                    td(item["product_name"], align="text-left font-medium"),
                    td(item["quantity_sold"].to_string(), align="text-center"),
                    td(money(item["unit_price"]), align="text-right"),
                    td(money(item["total_price"], "font-semibold"), align="text-right"),
                    td(money(item["profit"]), align="text-right"),
                    class_name=TABLE_ROW_STYLE,
                ),
            ),
            empty_message="Nothing sold today yet.",
            has_data=State.daily_items.length() > 0,
        ),
        pagination_controls(
            State.daily_page,
            State.daily_total_pages,
            State.daily_page_numbers,
            State.daily_go_to_page,
        ),
    )
