"""
Reusable UI components for the MotoParts dashboard.

Pages build their tables, forms, dialogs and pagination from these
helpers so every screen looks and behaves the same.
"""
import reflex as rx
from typing import Callable

from motoparts.constants import CURRENCY_SYMBOL, SEARCH_DEBOUNCE_MS
from motoparts.enums import PaymentStatus, StockLevel


BUTTON_STYLES = {
    "primary": "flex items-center justify-center gap-2 px-4 py-2 rounded-md bg-indigo-600 text-white hover:bg-indigo-700 min-h-[44px]",
    "primary_sm": "flex items-center justify-center gap-2 px-3 py-2 rounded-md bg-indigo-600 text-white hover:bg-indigo-700 min-h-[40px]",
    "secondary": "flex items-center justify-center gap-2 px-4 py-2 rounded-md border text-gray-700 hover:bg-gray-50 min-h-[44px]",
    "secondary_sm": "flex items-center justify-center gap-2 px-3 py-2 rounded-md border text-gray-700 hover:bg-gray-50 min-h-[40px]",
    "success": "flex items-center justify-center gap-2 px-4 py-2 rounded-md bg-green-600 text-white hover:bg-green-700 min-h-[44px]",
    "success_sm": "flex items-center justify-center gap-2 px-3 py-2 rounded-md bg-green-600 text-white hover:bg-green-700 min-h-[40px]",
    "danger": "flex items-center justify-center gap-2 px-4 py-2 rounded-md bg-red-600 text-white hover:bg-red-700 min-h-[44px]",
    "disabled": "flex items-center justify-center gap-2 px-4 py-2 rounded-md bg-gray-200 text-gray-500 cursor-not-allowed min-h-[44px]",
    "icon_danger": "p-2 text-red-500 hover:bg-red-100 rounded-full",
    "icon_primary": "p-2 text-blue-500 hover:bg-blue-100 rounded-full",
    "icon_success": "p-2 text-green-600 hover:bg-green-100 rounded-full",
}

INPUT_STYLES = {
    "default": "w-full p-2 border rounded-md",
    "error": "w-full p-2 border border-red-400 rounded-md",
    "small": "w-20 p-1 border rounded-md text-right",
}

CARD_STYLES = {
    "default": "bg-white p-4 sm:p-6 rounded-lg shadow-md",
    "bordered": "bg-white border border-gray-200 rounded-lg p-4 sm:p-5 shadow-sm",
}

TABLE_HEADER_STYLE = "bg-gray-100 text-left text-sm font-semibold text-gray-600"
TABLE_ROW_STYLE = "border-b hover:bg-gray-50"
TABLE_CELL_STYLE = "py-3 px-4"


def action_button(
    text: str | rx.Component,
    on_click: Callable,
    variant: str = "primary",
    icon: str | None = None,
    disabled: rx.Var | bool = False,
    button_type: str = "button",
) -> rx.Component:
    """
    Creates a styled action button.

    Args:
        text: Button text or component
        on_click: Click handler
        variant: Style key from BUTTON_STYLES
        icon: Optional lucide icon name
        disabled: Whether the button is disabled (may be a reactive var)
        button_type: HTML button type (``submit`` inside forms)
    """
    content = []
    if icon:
        content.append(rx.icon(icon, class_name="h-4 w-4"))
    content.append(rx.el.span(text) if isinstance(text, str) else text)

    if isinstance(disabled, rx.Var):
        class_name = rx.cond(disabled, BUTTON_STYLES["disabled"], BUTTON_STYLES[variant])
    else:
        class_name = BUTTON_STYLES["disabled"] if disabled else BUTTON_STYLES[variant]
    return rx.el.button(
        *content,
        on_click=on_click,
        disabled=disabled,
        type=button_type,
        class_name=class_name,
    )


def icon_button(
    icon: str,
    on_click: Callable,
    variant: str = "icon_primary",
    aria_label: str = "",
) -> rx.Component:
    return rx.el.button(
        rx.icon(icon, class_name="h-4 w-4"),
        on_click=on_click,
        aria_label=aria_label,
        title=aria_label,
        class_name=BUTTON_STYLES.get(variant, BUTTON_STYLES["icon_primary"]),
    )


def field_error(errors: rx.Var, field: str) -> rx.Component:
    """Inline message under a form field, shown when ``errors`` has the field."""
    return rx.cond(
        errors.contains(field),
        rx.el.p(errors[field], class_name="text-xs text-red-600"),
        rx.fragment(),
    )


def form_field(
    label: str,
    input_component: rx.Component,
    errors: rx.Var | None = None,
    field: str = "",
) -> rx.Component:
    """
    Labeled form field with an optional error line.

    Args:
        label: Field label text
        input_component: The input/select/textarea component
        errors: ``{field: message}`` var of the form
        field: Key of this field in ``errors``
    """
    parts = [
        rx.el.label(label, class_name="text-sm font-medium text-gray-700"),
        input_component,
    ]
    if errors is not None and field:
        parts.append(field_error(errors, field))
    return rx.el.div(*parts, class_name="flex flex-col gap-1")


def text_input(
    placeholder: str = "",
    value: rx.Var | str = "",
    on_change: Callable | None = None,
    input_type: str = "text",
    name: str | None = None,
    style: str = "default",
) -> rx.Component:
    props = {}
    if name:
        props["name"] = name
    return rx.el.input(
        type=input_type,
        placeholder=placeholder,
        value=value,
        on_change=on_change,
        class_name=INPUT_STYLES.get(style, INPUT_STYLES["default"]),
        **props,
    )


def search_input(placeholder: str, value: rx.Var, on_change: Callable) -> rx.Component:
    """Search box whose keystrokes are coalesced before ``on_change`` fires."""
    return rx.el.div(
        rx.icon("search", class_name="h-4 w-4 text-gray-400 absolute left-3 top-1/2 -translate-y-1/2"),
        rx.debounce_input(
            rx.el.input(
                placeholder=placeholder,
                value=value,
                on_change=on_change,
                class_name="w-full py-2 pl-9 pr-3 border rounded-md",
            ),
            debounce_timeout=SEARCH_DEBOUNCE_MS,
        ),
        class_name="relative w-full sm:w-80",
    )


def money(value: rx.Var, class_name: str = "") -> rx.Component:
    return rx.el.span(CURRENCY_SYMBOL, value.to_string(), class_name=class_name)


def _badge(text: str, colors: str) -> rx.Component:
    return rx.el.span(
        text,
        class_name=f"px-2 py-1 text-xs font-semibold rounded-full whitespace-nowrap {colors}",
    )


def payment_badge(status: rx.Var) -> rx.Component:
    return rx.match(
        status,
        (PaymentStatus.PAID.value, _badge("Paid", "bg-emerald-100 text-emerald-700")),
        (PaymentStatus.PARTIAL.value, _badge("Partial", "bg-sky-100 text-sky-700")),
        _badge("Unpaid", "bg-amber-100 text-amber-700"),
    )


def stock_badge(level: rx.Var) -> rx.Component:
    return rx.match(
        level,
        (StockLevel.OUT.value, _badge("Out of stock", "bg-red-100 text-red-700")),
        (StockLevel.LOW.value, _badge("Low stock", "bg-amber-100 text-amber-700")),
        _badge("In stock", "bg-emerald-100 text-emerald-700"),
    )


def empty_state(message: str) -> rx.Component:
    return rx.el.p(message, class_name="text-gray-500 text-center py-8")


def page_title(title: str | rx.Var, subtitle: str | rx.Var = "", actions: list[rx.Component] | None = None) -> rx.Component:
    """
    Page title with optional subtitle and right-aligned action buttons.
    """
    heading = [rx.el.h1(title, class_name="text-2xl font-bold text-gray-800")]
    if isinstance(subtitle, rx.Var) or subtitle:
        heading.append(rx.el.p(subtitle, class_name="text-sm text-gray-600"))
    return rx.el.div(
        rx.el.div(*heading),
        rx.el.div(*(actions or []), class_name="flex flex-wrap gap-2"),
        class_name="flex flex-col sm:flex-row sm:items-end justify-between gap-4 mb-6",
    )


def error_banner(message: rx.Var, on_retry: Callable) -> rx.Component:
    """Inline error of a failed load with a Retry button."""
    return rx.cond(
        message != "",
        rx.el.div(
            rx.el.div(
                rx.icon("circle-alert", class_name="h-5 w-5 text-red-600"),
                rx.el.p(message, class_name="text-sm text-red-700"),
                class_name="flex items-center gap-3",
            ),
            action_button("Retry", on_retry, variant="secondary_sm", icon="refresh-cw"),
            class_name="flex items-center justify-between gap-4 bg-red-50 border border-red-200 rounded-lg px-4 py-3 mb-4",
        ),
        rx.fragment(),
    )


def modal_container(
    is_open: rx.Var,
    on_close: Callable,
    title: str | rx.Var,
    description: str | rx.Var = "",
    children: list[rx.Component] | None = None,
    footer: rx.Component | None = None,
    max_width: str = "max-w-lg",
) -> rx.Component:
    """
    Modal dialog container.

    Args:
        is_open: Reactive var controlling visibility
        on_close: Handler for closing the modal
        title: Modal title
        description: Optional description
        children: Modal body content
        footer: Footer content (usually buttons)
        max_width: Tailwind max-width class
    """
    body_parts = [rx.el.h3(title, class_name="text-lg font-semibold text-gray-800")]
    if isinstance(description, rx.Var) or description:
        body_parts.append(rx.el.p(description, class_name="text-sm text-gray-600"))
    if children:
        body_parts.extend(children)
    if footer:
        body_parts.append(footer)

    return rx.cond(
        is_open,
        rx.el.div(
            rx.el.div(on_click=on_close, class_name="fixed inset-0 bg-black/40"),
            rx.el.div(
                *body_parts,
                class_name=f"relative z-10 w-full {max_width} rounded-xl bg-white p-6 shadow-xl max-h-[90vh] overflow-y-auto space-y-4",
            ),
            class_name="fixed inset-0 z-50 flex items-center justify-center px-4",
        ),
        rx.fragment(),
    )


def modal_footer(on_cancel: Callable, on_confirm: Callable, confirm_text: str = "Save") -> rx.Component:
    return rx.el.div(
        action_button("Cancel", on_cancel, variant="secondary"),
        action_button(confirm_text, on_confirm, variant="primary"),
        class_name="flex justify-end gap-3 pt-2",
    )


def confirm_dialog(
    is_open: rx.Var,
    on_cancel: Callable,
    on_confirm: Callable,
    title: str = "Delete record",
    message: str = "This action cannot be undone.",
) -> rx.Component:
    return modal_container(
        is_open=is_open,
        on_close=on_cancel,
        title=title,
        description=message,
        footer=rx.el.div(
            action_button("Cancel", on_cancel, variant="secondary"),
            action_button("Delete", on_confirm, variant="danger", icon="trash-2"),
            class_name="flex justify-end gap-3 pt-2",
        ),
        max_width="max-w-md",
    )


def stat_card(
    icon: str,
    title: str,
    value: rx.Var | rx.Component,
    icon_color: str = "text-gray-600",
) -> rx.Component:
    return rx.el.div(
        rx.el.div(
            rx.icon(icon, class_name=f"h-6 w-6 {icon_color}"),
            class_name="p-3 bg-gray-100 rounded-lg",
        ),
        rx.el.div(
            rx.el.p(title, class_name="text-sm font-medium text-gray-500"),
            rx.el.p(value, class_name="text-2xl font-bold text-gray-800"),
            class_name="flex-grow",
        ),
        class_name="flex items-center gap-4 bg-white p-4 rounded-xl shadow-sm border",
    )


def _page_button(number: rx.Var, current_page: rx.Var, on_page: Callable) -> rx.Component:
    # 0 marks a gap in the page window
    return rx.cond(
        number == 0,
        rx.el.span("...", class_name="px-2 text-gray-400"),
        rx.el.button(
            number.to_string(),
            on_click=lambda: on_page(number),
            class_name=rx.cond(
                number == current_page,
                "min-w-[40px] px-3 py-2 rounded-md bg-indigo-600 text-white",
                "min-w-[40px] px-3 py-2 rounded-md bg-gray-200 hover:bg-gray-300",
            ),
        ),
    )


def pagination_controls(
    current_page: rx.Var,
    total_pages: rx.Var,
    page_numbers: rx.Var,
    on_page: Callable,
) -> rx.Component:
    """
    Previous/next buttons around a window of page numbers.

    Args:
        current_page: Current page (reactive var)
        total_pages: Total number of pages (reactive var)
        page_numbers: Output of ``utils.pagination.page_numbers`` (reactive var)
        on_page: Event handler receiving the target page
    """
    return rx.cond(
        total_pages > 1,
        rx.el.div(
            rx.el.button(
                "Previous",
                on_click=lambda: on_page(current_page - 1),
                disabled=current_page <= 1,
                class_name=rx.cond(
                    current_page <= 1,
                    "px-4 py-2 bg-gray-200 text-gray-500 rounded-md cursor-not-allowed min-h-[40px]",
                    "px-4 py-2 bg-gray-200 rounded-md hover:bg-gray-300 min-h-[40px]",
                ),
            ),
            rx.el.div(
                rx.foreach(page_numbers, lambda n: _page_button(n, current_page, on_page)),
                class_name="flex items-center gap-1",
            ),
            rx.el.button(
                "Next",
                on_click=lambda: on_page(current_page + 1),
                disabled=current_page >= total_pages,
                class_name=rx.cond(
                    current_page >= total_pages,
                    "px-4 py-2 bg-gray-200 text-gray-500 rounded-md cursor-not-allowed min-h-[40px]",
                    "px-4 py-2 bg-gray-200 rounded-md hover:bg-gray-300 min-h-[40px]",
                ),
            ),
            class_name="flex flex-col sm:flex-row justify-center items-center gap-3 sm:gap-4 mt-6",
        ),
        rx.fragment(),
    )


def data_table(
    headers: list[tuple[str, str]],
    rows: rx.Component,
    empty_message: str = "No records found.",
    has_data: rx.Var | bool = True,
) -> rx.Component:
    """
    Styled data table.

    Args:
        headers: List of (header_text, alignment_class) tuples
        rows: The tbody content (usually an rx.foreach)
        empty_message: Message shown when the table is empty
        has_data: Whether there are rows (reactive var)
    """
    header_cells = [rx.el.th(text, class_name=f"py-3 px-4 {align}") for text, align in headers]
    empty_component = empty_state(empty_message)
    if isinstance(has_data, rx.Var):
        empty_section = rx.cond(has_data, rx.fragment(), empty_component)
    else:
        empty_section = rx.fragment() if has_data else empty_component

    return rx.el.div(
        rx.el.table(
            rx.el.thead(rx.el.tr(*header_cells, class_name=TABLE_HEADER_STYLE)),
            rx.el.tbody(rows),
            class_name="w-full text-sm",
        ),
        empty_section,
        class_name="bg-white p-4 sm:p-6 rounded-lg shadow-md overflow-x-auto flex flex-col gap-4",
    )


def td(*children, align: str = "text-left") -> rx.Component:
    return rx.el.td(*children, class_name=f"{TABLE_CELL_STYLE} {align}")
