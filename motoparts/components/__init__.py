"""
Shared UI components.
"""
from .ui import (
    BUTTON_STYLES,
    INPUT_STYLES,
    CARD_STYLES,
    TABLE_HEADER_STYLE,
    TABLE_ROW_STYLE,
    action_button,
    icon_button,
    field_error,
    form_field,
    text_input,
    search_input,
    money,
    payment_badge,
    stock_badge,
    empty_state,
    page_title,
    error_banner,
    modal_container,
    modal_footer,
    confirm_dialog,
    stat_card,
    pagination_controls,
    data_table,
    td,
)
from .layout import app_layout, auth_layout

__all__ = [
    "BUTTON_STYLES",
    "INPUT_STYLES",
    "CARD_STYLES",
    "TABLE_HEADER_STYLE",
    "TABLE_ROW_STYLE",
    "action_button",
    "icon_button",
    "field_error",
    "form_field",
    "text_input",
    "search_input",
    "money",
    "payment_badge",
    "stock_badge",
    "empty_state",
    "page_title",
    "error_banner",
    "modal_container",
    "modal_footer",
    "confirm_dialog",
    "stat_card",
    "pagination_controls",
    "data_table",
    "td",
    "app_layout",
    "auth_layout",
]
