import reflex as rx

from motoparts.components import (
    INPUT_STYLES,
    TABLE_ROW_STYLE,
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
    td,
)
from motoparts.state import State


def sale_line_editor() -> rx.Component:
    return modal_container(
        is_open=State.sale_line_modal_open,
        on_close=State.close_sale_line_editor,
        title="Edit sold quantity",
        description=State.sale_line_editing["product_name"],
        children=[
            form_field(
                "Quantity",
                rx.el.input(
                    type="number",
                    min="1",
                    value=State.sale_line_quantity,
                    on_change=State.set_sale_line_quantity,
                    class_name=INPUT_STYLES["default"],
                ),
                State.sale_line_errors,
                "quantity",
            ),
        ],
        footer=modal_footer(State.close_sale_line_editor, State.save_sale_line),
        max_width="max-w-md",
    )


def _line_row(item: rx.Var) -> rx.Component:
    return rx.el.tr(
        td(item["created_at"]),
        td(item["product_name"], align="text-left font-medium"),
        td(item["sku"]),
        td(item["quantity_sold"].to_string(), align="text-center"),
        td(money(item["unit_price"]), align="text-right"),
        td(money(item["total_price"], "font-semibold"), align="text-right"),
        td(money(item["profit"]), align="text-right"),
        td(rx.el.div(
            icon_button("pencil", lambda: State.open_sale_line_editor(item), aria_label="Edit"),
            icon_button("trash-2", lambda: State.ask_delete_sale_line(item["id"]), "icon_danger", "Delete"),
            class_name="flex justify-center gap-1",
        ), align="text-center"),
        class_name=TABLE_ROW_STYLE,
    )


def all_sales_page() -> rx.Component:
    return app_layout(
        page_title("All Sale Items", "Every line sold, across all sales"),
        error_banner(State.sale_lines_error, State.load_sale_lines),
        data_table(
            headers=[
                ("Date", "text-left"),
                ("Product", "text-left"),
                ("SKU", "text-left"),
                ("Qty", "text-center"),
                ("Unit price", "text-right"),
                ("Total", "text-right"),
                ("Profit", "text-right"),
                ("Actions", "text-center"),
            ],
            rows=rx.foreach(State.sale_lines_items, _line_row),
            empty_message="No items sold yet.",
            has_data=State.sale_lines_items.length() > 0,
        ),
        pagination_controls(
            State.sale_lines_page,
            State.sale_lines_total_pages,
            State.sale_lines_page_numbers,
            State.sale_lines_go_to_page,
        ),
        sale_line_editor(),
        confirm_dialog(
            State.sale_line_delete_id > 0,
            State.cancel_delete_sale_line,
            State.delete_sale_line,
            title="Delete sale item",
            message="The quantity goes back to stock. This cannot be undone.",
        ),
    )
