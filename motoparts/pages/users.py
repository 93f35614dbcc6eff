import reflex as rx

from motoparts.components import (
    INPUT_STYLES,
    TABLE_ROW_STYLE,
    app_layout,
    confirm_dialog,
    data_table,
    error_banner,
    icon_button,
    page_title,
    pagination_controls,
    td,
)
from motoparts.state import State


def _user_row(user: rx.Var) -> rx.Component:
    return rx.el.tr(
        td(rx.el.div(
            rx.image(
                src=f"https://api.dicebear.com/9.x/initials/svg?seed={user['username']}",
                class_name="h-8 w-8 rounded-full",
            ),
            rx.el.span(user["username"], class_name="font-medium"),
            class_name="flex items-center gap-3",
        )),
        td(user["email"]),
        td(
            rx.el.select(
                rx.foreach(State.user_roles_options, lambda r: rx.el.option(r, value=r)),
                value=user["role"],
                on_change=lambda role: State.change_user_role(user["id"], role),
                class_name=INPUT_STYLES["default"] + " w-32",
            ),
            align="text-center",
        ),
        td(
            icon_button("trash-2", lambda: State.ask_delete_user(user["id"]), "icon_danger", "Delete"),
            align="text-center",
        ),
        class_name=TABLE_ROW_STYLE,
    )


def users_page() -> rx.Component:
    return app_layout(
        page_title("Users", "Staff accounts and their roles"),
        error_banner(State.user_error, State.load_users),
        data_table(
            headers=[("User", "text-left"), ("Email", "text-left"), ("Role", "text-center"), ("", "text-center")],
            rows=rx.foreach(State.user_page_items, _user_row),
            empty_message="No users found.",
            has_data=State.user_items.length() > 0,
        ),
        pagination_controls(
            State.user_page,
            State.user_total_pages,
            State.user_page_numbers,
            State.user_go_to_page,
        ),
        confirm_dialog(
            State.user_delete_id > 0,
            State.cancel_delete_user,
            State.delete_user,
            title="Delete user",
            message="The account and its access are removed permanently.",
        ),
    )
