import reflex as rx

from motoparts.components import (
    INPUT_STYLES,
    TABLE_ROW_STYLE,
    action_button,
    app_layout,
    confirm_dialog,
    data_table,
    error_banner,
    form_field,
    icon_button,
    modal_container,
    modal_footer,
    page_title,
    pagination_controls,
    search_input,
    td,
)
from motoparts.state import State

SUPPLIER_FIELDS = [
    ("Contact person", "name", "text"),
    ("Company", "company_name", "text"),
    ("Phone", "phone", "tel"),
    ("Email", "email", "email"),
]


def supplier_modal() -> rx.Component:
    fields = [
        form_field(
            label,
            rx.el.input(
                type=input_type,
                value=State.supplier_form[field],
                on_change=lambda v, field=field: State.set_supplier_field(field, v),
                class_name=INPUT_STYLES["default"],
            ),
            State.supplier_errors,
            field,
        )
        for label, field, input_type in SUPPLIER_FIELDS
    ]
    return modal_container(
        is_open=State.supplier_modal_open,
        on_close=State.close_supplier_modal,
        title=rx.cond(State.supplier_editing_id > 0, "Edit Supplier", "Add Supplier"),
        children=[
            rx.el.div(*fields, class_name="grid grid-cols-1 sm:grid-cols-2 gap-4"),
            form_field(
                "Address",
                rx.el.textarea(
                    value=State.supplier_form["address"],
                    on_change=lambda v: State.set_supplier_field("address", v),
                    class_name=INPUT_STYLES["default"],
                ),
                State.supplier_errors,
                "address",
            ),
        ],
        footer=modal_footer(State.close_supplier_modal, State.save_supplier),
        max_width="max-w-2xl",
    )


def _supplier_row(supplier: rx.Var) -> rx.Component:
    return rx.el.tr(
        td(supplier["name"], align="text-left font-medium"),
        td(supplier["company_name"]),
        td(supplier["phone"]),
        td(supplier["email"]),
        td(supplier["address"], align="text-left text-gray-600"),
        td(rx.el.div(
            icon_button("pencil", lambda: State.open_supplier_modal(supplier), aria_label="Edit"),
            icon_button("trash-2", lambda: State.ask_delete_supplier(supplier["id"]), "icon_danger", "Delete"),
            class_name="flex justify-center gap-1",
        ), align="text-center"),
        class_name=TABLE_ROW_STYLE,
    )


def suppliers_page() -> rx.Component:
    return app_layout(
        page_title(
            "Suppliers",
            "Who we buy parts from",
            actions=[action_button("Add Supplier", State.open_supplier_modal, icon="plus")],
        ),
        error_banner(State.supplier_error, State.load_suppliers),
        search_input("Search suppliers...", State.supplier_search, State.set_supplier_search),
        data_table(
            headers=[
                ("Contact", "text-left"),
                ("Company", "text-left"),
                ("Phone", "text-left"),
                ("Email", "text-left"),
                ("Address", "text-left"),
                ("Actions", "text-center"),
            ],
            rows=rx.foreach(State.supplier_items, _supplier_row),
            empty_message="No suppliers found.",
            has_data=State.supplier_items.length() > 0,
        ),
        pagination_controls(
            State.supplier_page,
            State.supplier_total_pages,
            State.supplier_page_numbers,
            State.supplier_go_to_page,
        ),
        supplier_modal(),
        confirm_dialog(
            State.supplier_delete_id > 0,
            State.cancel_delete_supplier,
            State.delete_supplier,
            title="Delete supplier",
        ),
    )
