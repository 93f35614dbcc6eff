import reflex as rx

from motoparts.components import (
    INPUT_STYLES,
    TABLE_ROW_STYLE,
    action_button,
    app_layout,
    confirm_dialog,
    error_banner,
    form_field,
    icon_button,
    modal_container,
    modal_footer,
    money,
    page_title,
    pagination_controls,
    search_input,
    td,
)
from motoparts.components.ui import TABLE_HEADER_STYLE, empty_state
from motoparts.state import State


def _sort_header(label: str, field: str, align: str = "text-left") -> rx.Component:
    return rx.el.th(
        rx.el.button(
            label,
            rx.cond(
                State.expense_sort_by == field,
                rx.cond(
                    State.expense_sort_order == "asc",
                    rx.icon("arrow-up", class_name="h-3 w-3"),
                    rx.icon("arrow-down", class_name="h-3 w-3"),
                ),
                rx.icon("arrow-up-down", class_name="h-3 w-3 text-gray-400"),
            ),
            on_click=lambda: State.sort_expenses(field),
            class_name="flex items-center gap-1 font-semibold",
        ),
        class_name=f"py-3 px-4 {align}",
    )


def expense_modal() -> rx.Component:
    errors = State.expense_errors
    return modal_container(
        is_open=State.expense_modal_open,
        on_close=State.close_expense_modal,
        title=rx.cond(State.expense_editing_id > 0, "Edit Expense", "Add Expense"),
        children=[
            form_field(
                "Description",
                rx.el.input(
                    value=State.expense_form["description"],
                    on_change=lambda v: State.set_expense_field("description", v),
                    class_name=INPUT_STYLES["default"],
                ),
                errors,
                "description",
            ),
            rx.el.div(
                form_field(
                    "Amount",
                    rx.el.input(
                        type="number",
                        min="0",
                        step="0.01",
                        value=State.expense_form["amount"],
                        on_change=lambda v: State.set_expense_field("amount", v),
                        class_name=INPUT_STYLES["default"],
                    ),
                    errors,
                    "amount",
                ),
                form_field(
                    "Date",
                    rx.el.input(
                        type="date",
                        value=State.expense_form["date"],
                        on_change=lambda v: State.set_expense_field("date", v),
                        class_name=INPUT_STYLES["default"],
                    ),
                    errors,
                    "date",
                ),
                class_name="grid grid-cols-2 gap-4",
            ),
            form_field(
                "Category",
                rx.el.select(
                    rx.el.option("Select category", value=""),
                    rx.foreach(State.expense_categories, lambda c: rx.el.option(c, value=c)),
                    value=State.expense_form["category"],
                    on_change=lambda v: State.set_expense_field("category", v),
                    class_name=INPUT_STYLES["default"],
                ),
                errors,
                "category",
            ),
        ],
        footer=modal_footer(State.close_expense_modal, State.save_expense),
    )


def _expense_row(expense: rx.Var) -> rx.Component:
    return rx.el.tr(
        td(expense["date"]),
        td(expense["description"], align="text-left font-medium"),
        td(expense["category"]),
        td(money(expense["amount"], "font-semibold"), align="text-right"),
        td(rx.el.div(
            icon_button("pencil", lambda: State.open_expense_modal(expense), aria_label="Edit"),
            icon_button("trash-2", lambda: State.ask_delete_expense(expense["id"]), "icon_danger", "Delete"),
            class_name="flex justify-center gap-1",
        ), align="text-center"),
        class_name=TABLE_ROW_STYLE,
    )


def expenses_page() -> rx.Component:
    return app_layout(
        page_title(
            "Expenses",
            "Shop running costs",
            actions=[action_button("Add Expense", State.open_expense_modal, icon="plus")],
        ),
        error_banner(State.expense_error, State.load_expenses),
        search_input("Search expenses...", State.expense_search, State.set_expense_search),
        rx.el.div(
            rx.el.table(
                rx.el.thead(
                    rx.el.tr(
                        _sort_header("Date", "date"),
                        _sort_header("Description", "description"),
                        _sort_header("Category", "category"),
                        _sort_header("Amount", "amount", "text-right"),
                        rx.el.th("Actions", class_name="py-3 px-4 text-center"),
                        class_name=TABLE_HEADER_STYLE,
                    )
                ),
                rx.el.tbody(rx.foreach(State.expense_items, _expense_row)),
                class_name="w-full text-sm",
            ),
            rx.cond(State.expense_items.length() > 0, rx.fragment(), empty_state("No expenses recorded.")),
            class_name="bg-white p-4 sm:p-6 rounded-lg shadow-md overflow-x-auto",
        ),
        pagination_controls(
            State.expense_page,
            State.expense_total_pages,
            State.expense_page_numbers,
            State.expense_go_to_page,
        ),
        expense_modal(),
        confirm_dialog(
            State.expense_delete_id > 0,
            State.cancel_delete_expense,
            State.delete_expense,
            title="Delete expense",
        ),
    )
