"""
Dashboard with today's and this month's figures.
"""
import reflex as rx

from motoparts.components import action_button, app_layout, error_banner, page_title, stat_card
from motoparts.state import State


def _quick_link(label: str, icon: str, href: str) -> rx.Component:
    return rx.el.a(
        rx.icon(icon, class_name="h-5 w-5 text-indigo-600"),
        rx.el.span(label, class_name="font-medium text-gray-700"),
        href=href,
        class_name="flex items-center gap-3 bg-white p-4 rounded-xl shadow-sm border hover:border-indigo-300",
    )


def dashboard_page() -> rx.Component:
    return app_layout(
        page_title(
            "Dashboard",
            "Sales and expenses at a glance",
            actions=[action_button("Refresh", State.load_dashboard, variant="secondary_sm", icon="refresh-cw")],
        ),
        error_banner(State.dashboard_error, State.load_dashboard),
        rx.el.div(
            stat_card("banknote", "Today's Sales", State.dashboard_cards["today_sales"], "text-emerald-600"),
            stat_card("trending-up", "Monthly Revenue", State.dashboard_cards["monthly_revenue"], "text-indigo-600"),
            rx.cond(
                State.is_admin,
                rx.fragment(
                    stat_card("receipt", "Today's Expenses", State.dashboard_cards["today_expenses"], "text-red-500"),
                    stat_card("wallet", "Monthly Expenses", State.dashboard_cards["monthly_expenses"], "text-amber-600"),
                    stat_card("scale", "Monthly Net", State.dashboard_cards["monthly_net"], "text-sky-600"),
                ),
                rx.fragment(),
            ),
            class_name="grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-3 gap-4",
        ),
        rx.cond(
            State.low_stock_count > 0,
            rx.el.a(
                rx.icon("triangle-alert", class_name="h-5 w-5 text-amber-600"),
                rx.el.span(
                    State.low_stock_count.to_string(),
                    " products are running low on stock",
                    class_name="text-sm text-amber-800",
                ),
                href="/low-stock",
                class_name="flex items-center gap-3 bg-amber-50 border border-amber-200 px-4 py-3 rounded-lg",
            ),
            rx.fragment(),
        ),
        rx.el.div(
            _quick_link("New Sale", "shopping-cart", "/sales/new"),
            _quick_link("Products", "package", "/products"),
            _quick_link("Debtors", "book-open", "/debtors"),
            _quick_link("Reports", "chart-bar", "/reports"),
            class_name="grid grid-cols-2 lg:grid-cols-4 gap-4",
        ),
    )
