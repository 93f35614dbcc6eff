"""
Reports: stock health chart, sales figures and the Excel export.
"""
import reflex as rx

from motoparts.components import (
    action_button,
    app_layout,
    error_banner,
    money,
    page_title,
    stat_card,
)
from motoparts.components.ui import CARD_STYLES
from motoparts.state import State


def stock_chart() -> rx.Component:
    return rx.el.div(
        rx.el.h2("Stock health", class_name="text-lg font-semibold text-gray-700 mb-4"),
        rx.recharts.pie_chart(
            rx.recharts.pie(
                rx.foreach(
                    State.stock_chart_data,
                    lambda entry: rx.recharts.cell(fill=entry["fill"]),
                ),
                data=State.stock_chart_data,
                data_key="value",
                name_key="name",
                inner_radius="45%",
                label=True,
            ),
            rx.recharts.graphing_tooltip(),
            rx.recharts.legend(),
            width="100%",
            height=300,
        ),
        class_name=CARD_STYLES["default"],
    )


def reports_page() -> rx.Component:
    figures = State.report_figures
    return app_layout(
        page_title(
            "Reports",
            "Inventory and sales overview",
            actions=[
                action_button("Refresh", State.load_report, variant="secondary_sm", icon="refresh-cw"),
                action_button(
                    "Export Excel",
                    State.export_report,
                    variant="success_sm",
                    icon="file-spreadsheet",
                    disabled=~State.report_loaded,
                ),
            ],
        ),
        error_banner(State.report_error, State.load_report),
        rx.el.div(
            stat_card("package", "Products", figures["products"].to_string(), "text-indigo-600"),
            stat_card("triangle-alert", "Low stock", figures["low_stock"].to_string(), "text-amber-600"),
            stat_card("circle-x", "Out of stock", figures["out_of_stock"].to_string(), "text-red-600"),
            stat_card("warehouse", "Stock at cost", money(figures["stock_cost"]), "text-sky-600"),
            stat_card("tags", "Stock at retail", money(figures["stock_retail"]), "text-emerald-600"),
            stat_card("receipt", "Sales", figures["sales_count"].to_string(), "text-indigo-600"),
            stat_card("banknote", "Sales revenue", money(figures["sales_revenue"]), "text-emerald-600"),
            stat_card("hand-coins", "Outstanding credit", money(figures["outstanding"]), "text-red-600"),
            class_name="grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-4 gap-4",
        ),
        stock_chart(),
    )
