"""
Debtors ledger: one row per customer with an outstanding balance, expandable
into the unpaid sales that make it up.
"""
import reflex as rx

from motoparts.components import (
    action_button,
    app_layout,
    empty_state,
    error_banner,
    money,
    page_title,
    pagination_controls,
    search_input,
    stat_card,
)
from motoparts.state import State


def _transaction_row(tx: rx.Var) -> rx.Component:
    return rx.el.a(
        rx.el.span("#", tx["sale_id"].to_string(), class_name="font-medium text-indigo-600"),
        rx.el.span(tx["date"], class_name="text-gray-500"),
        money(tx["amount"]),
        money(tx["paid"], "text-emerald-700"),
        money(tx["remaining"], "font-semibold text-red-600"),
        href=f"/debtors/{tx['sale_id']}",
        class_name="grid grid-cols-5 gap-2 px-4 py-2 text-sm hover:bg-indigo-50 rounded-md",
    )


def _ledger_card(ledger: rx.Var) -> rx.Component:
    expanded = State.debtor_expanded == ledger["id"]
    return rx.el.div(
        rx.el.button(
            rx.el.div(
                rx.cond(
                    expanded,
                    rx.icon("chevron-down", class_name="h-4 w-4 text-gray-500"),
                    rx.icon("chevron-right", class_name="h-4 w-4 text-gray-500"),
                ),
                rx.el.div(
                    rx.el.span(ledger["name"], class_name="font-semibold text-gray-800"),
                    rx.el.span(ledger["phone"], class_name="text-xs text-gray-500"),
                    class_name="flex flex-col text-left",
                ),
                class_name="flex items-center gap-3",
            ),
            rx.el.div(
                rx.el.span(ledger["transactions"].length().to_string(), " open sales", class_name="text-xs text-gray-500"),
                money(ledger["total_credit"], "font-bold text-red-600"),
                class_name="flex items-center gap-4",
            ),
            on_click=lambda: State.toggle_debtor(ledger["id"]),
            class_name="w-full flex justify-between items-center px-4 py-3",
        ),
        rx.cond(
            expanded,
            rx.el.div(
                rx.el.div(
                    rx.el.span("Sale"),
                    rx.el.span("Date"),
                    rx.el.span("Amount"),
                    rx.el.span("Paid"),
                    rx.el.span("Remaining"),
                    class_name="grid grid-cols-5 gap-2 px-4 py-1 text-xs uppercase text-gray-500",
                ),
                rx.foreach(ledger["transactions"], _transaction_row),
                class_name="border-t px-2 py-2",
            ),
            rx.fragment(),
        ),
        class_name="bg-white rounded-lg shadow-sm border",
    )


def debtors_page() -> rx.Component:
    return app_layout(
        page_title(
            "Debtors",
            "Customers with unpaid or partially paid sales",
            actions=[action_button("Refresh", State.load_debtors, variant="secondary_sm", icon="refresh-cw")],
        ),
        error_banner(State.debtor_error, State.load_debtors),
        rx.el.div(
            stat_card("users", "Debtors", State.debtor_ledgers.length().to_string(), "text-indigo-600"),
            stat_card("hand-coins", "Outstanding credit", money(State.debtor_total_credit), "text-red-600"),
            class_name="grid grid-cols-1 sm:grid-cols-2 gap-4",
        ),
        search_input("Search by name, phone or sale #...", State.debtor_search, State.set_debtor_search),
        rx.cond(
            State.debtor_page_items.length() > 0,
            rx.el.div(
                rx.foreach(State.debtor_page_items, _ledger_card),
                class_name="flex flex-col gap-3",
            ),
            empty_state("No outstanding balances."),
        ),
        pagination_controls(
            State.debtor_page,
            State.debtor_total_pages,
            State.debtor_page_numbers,
            State.debtor_go_to_page,
        ),
    )
