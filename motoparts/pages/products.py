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
    money,
    page_title,
    pagination_controls,
    search_input,
    stock_badge,
    td,
)
from motoparts.state import State


def _select(field: str, options: rx.Var, placeholder: str) -> rx.Component:
    return rx.el.select(
        rx.el.option(placeholder, value=""),
        rx.foreach(options, lambda o: rx.el.option(o["name"], value=o["id"].to_string())),
        value=State.product_form[field],
        on_change=lambda v: State.set_product_field(field, v),
        class_name=INPUT_STYLES["default"],
    )


def _input(field: str, input_type: str = "text", placeholder: str = "") -> rx.Component:
    return rx.el.input(
        type=input_type,
        placeholder=placeholder,
        value=State.product_form[field],
        on_change=lambda v: State.set_product_field(field, v),
        class_name=INPUT_STYLES["default"],
    )


def _model_chip(model: rx.Var) -> rx.Component:
    selected = State.product_form["compatible_model_ids"].to(list).contains(model["id"])
    return rx.el.button(
        model["name"],
        type="button",
        on_click=lambda: State.toggle_product_model(model["id"]),
        class_name=rx.cond(
            selected,
            "px-3 py-1 rounded-full text-xs bg-indigo-600 text-white",
            "px-3 py-1 rounded-full text-xs bg-gray-100 text-gray-700 hover:bg-gray-200",
        ),
    )


def product_modal() -> rx.Component:
    errors = State.product_errors
    return modal_container(
        is_open=State.product_modal_open,
        on_close=State.close_product_modal,
        title=State.product_modal_title,
        children=[
            rx.el.div(
                form_field("Name", _input("name", placeholder="Brake pad"), errors, "name"),
                form_field("SKU", _input("sku", placeholder="BP-100"), errors, "sku"),
                form_field("Brand", _select("brand_id", State.brand_options, "Select brand"), errors, "brand_id"),
                form_field("Shelf code", _select("shelf_code_id", State.shelf_options, "No shelf"), errors, "shelf_code_id"),
                form_field("Quantity in stock", _input("quantity_in_stock", "number"), errors, "quantity_in_stock"),
                form_field("Purchase price", _input("purchase_price", "number"), errors, "purchase_price"),
                form_field("Selling price", _input("selling_price", "number"), errors, "selling_price"),
                class_name="grid grid-cols-1 sm:grid-cols-2 gap-4",
            ),
            form_field(
                "Description",
                rx.el.textarea(
                    value=State.product_form["description"],
                    on_change=lambda v: State.set_product_field("description", v),
                    class_name=INPUT_STYLES["default"],
                ),
                errors,
                "description",
            ),
            form_field(
                "Compatible models",
                rx.el.div(
                    rx.foreach(State.model_options, _model_chip),
                    class_name="flex flex-wrap gap-2",
                ),
                errors,
                "compatible_model_ids",
            ),
        ],
        footer=modal_footer(State.close_product_modal, State.save_product),
        max_width="max-w-2xl",
    )


def _product_row(product: rx.Var) -> rx.Component:
    return rx.el.tr(
        td(rx.el.div(
            rx.el.span(product["name"], class_name="font-medium"),
            rx.el.span(product["sku"], class_name="text-xs text-gray-500"),
            class_name="flex flex-col",
        )),
        td(product["brand_name"]),
        td(product["shelf_code"]),
        td(product["compatible_models"], align="text-left text-xs text-gray-600"),
        td(rx.el.div(
            product["quantity_in_stock"].to_string(),
            stock_badge(product["stock_level"]),
            class_name="flex items-center justify-center gap-2",
        ), align="text-center"),
        td(money(product["purchase_price"]), align="text-right"),
        td(money(product["selling_price"]), align="text-right"),
        td(rx.el.div(
            icon_button("pencil", lambda: State.open_product_modal(product), aria_label="Edit"),
            icon_button("trash-2", lambda: State.ask_delete_product(product["id"]), "icon_danger", "Delete"),
            class_name="flex justify-center gap-1",
        ), align="text-center"),
        class_name=TABLE_ROW_STYLE,
    )


def products_page() -> rx.Component:
    return app_layout(
        page_title(
            "Products",
            "Parts in the catalog and their stock",
            actions=[action_button("Add Product", State.open_product_modal, icon="plus")],
        ),
        error_banner(State.products_error, State.load_products),
        rx.el.div(
            search_input("Search products by name...", State.products_search, State.set_products_search),
            rx.el.span(State.products_total_items.to_string(), " products", class_name="text-sm text-gray-500"),
            class_name="flex flex-col sm:flex-row sm:items-center justify-between gap-3",
        ),
        data_table(
            headers=[
                ("Product", "text-left"),
                ("Brand", "text-left"),
                ("Shelf", "text-left"),
                ("Compatible models", "text-left"),
                ("Stock", "text-center"),
                ("Purchase", "text-right"),
                ("Selling", "text-right"),
                ("Actions", "text-center"),
            ],
            rows=rx.foreach(State.products_items, _product_row),
            empty_message="No products found.",
            has_data=State.products_items.length() > 0,
        ),
        pagination_controls(
            State.products_page,
            State.products_total_pages,
            State.products_page_numbers,
            State.products_go_to_page,
        ),
        product_modal(),
        confirm_dialog(
            State.product_delete_id > 0,
            State.cancel_delete_product,
            State.delete_product,
            title="Delete product",
        ),
    )
