"""
Brands, shelf codes and compatible models share one page; the state picks
the catalog from the route on load.
"""
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
    page_title,
    pagination_controls,
    search_input,
    td,
)
from motoparts.components.ui import TABLE_HEADER_STYLE, empty_state
from motoparts.state import State


def catalog_modal() -> rx.Component:
    return modal_container(
        is_open=State.catalog_modal_open,
        on_close=State.close_catalog_modal,
        title=rx.cond(State.catalog_editing_id > 0, "Edit ", "Add ") + State.catalog_label,
        children=[
            form_field(
                "Name",
                rx.el.input(
                    value=State.catalog_form["name"],
                    on_change=lambda v: State.set_catalog_field("name", v),
                    class_name=INPUT_STYLES["default"],
                ),
                State.catalog_errors,
                "name",
            ),
            rx.cond(
                State.catalog_has_description,
                form_field(
                    "Description",
                    rx.el.textarea(
                        value=State.catalog_form["description"],
                        on_change=lambda v: State.set_catalog_field("description", v),
                        class_name=INPUT_STYLES["default"],
                    ),
                    State.catalog_errors,
                    "description",
                ),
                rx.fragment(),
            ),
        ],
        footer=modal_footer(State.close_catalog_modal, State.save_catalog_entry),
    )


def _entry_row(entry: rx.Var) -> rx.Component:
    return rx.el.tr(
        td(entry["name"], align="text-left font-medium"),
        rx.cond(
            State.catalog_has_description,
            td(entry["description"], align="text-left text-gray-600"),
            rx.fragment(),
        ),
        td(rx.el.div(
            icon_button("pencil", lambda: State.open_catalog_modal(entry), aria_label="Edit"),
            icon_button("trash-2", lambda: State.ask_delete_catalog_entry(entry["id"]), "icon_danger", "Delete"),
            class_name="flex justify-center gap-1",
        ), align="text-center"),
        class_name=TABLE_ROW_STYLE,
    )


def catalog_page() -> rx.Component:
    return app_layout(
        page_title(
            State.catalog_title,
            actions=[action_button("Add", State.open_catalog_modal, icon="plus")],
        ),
        error_banner(State.catalog_error, State.load_catalog),
        search_input("Search...", State.catalog_search, State.set_catalog_search),
        rx.el.div(
            rx.el.table(
                rx.el.thead(
                    rx.el.tr(
                        rx.el.th("Name", class_name="py-3 px-4 text-left"),
                        rx.cond(
                            State.catalog_has_description,
                            rx.el.th("Description", class_name="py-3 px-4 text-left"),
                            rx.fragment(),
                        ),
                        rx.el.th("Actions", class_name="py-3 px-4 text-center"),
                        class_name=TABLE_HEADER_STYLE,
                    )
                ),
                rx.el.tbody(rx.foreach(State.catalog_page_items, _entry_row)),
                class_name="w-full text-sm",
            ),
            rx.cond(
                State.catalog_page_items.length() > 0,
                rx.fragment(),
                empty_state("Nothing here yet."),
            ),
            class_name="bg-white p-4 sm:p-6 rounded-lg shadow-md overflow-x-auto",
        ),
        pagination_controls(
            State.catalog_page,
            State.catalog_total_pages,
            State.catalog_page_numbers,
            State.catalog_go_to_page,
        ),
        catalog_modal(),
        confirm_dialog(
            State.catalog_delete_id > 0,
            State.cancel_delete_catalog_entry,
            State.delete_catalog_entry,
            title="Delete entry",
            message="Products that use this entry may block the deletion.",
        ),
    )
