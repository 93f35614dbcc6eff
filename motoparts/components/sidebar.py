import reflex as rx
from motoparts.state import State


def nav_item(item: rx.Var) -> rx.Component:
    return rx.el.a(
        rx.el.div(
            rx.icon(item["icon"], class_name="h-5 w-5"),
            rx.el.span(item["label"], class_name="flex-1"),
            rx.cond(
                (item["route"] == "/low-stock") & (State.low_stock_count > 0),
                rx.el.span(
                    State.low_stock_count.to_string(),
                    class_name="px-2 py-0.5 text-xs font-semibold rounded-full bg-red-100 text-red-700",
                ),
                rx.fragment(),
            ),
            class_name=rx.cond(
                State.active_route == item["route"],
                "flex items-center gap-3 rounded-lg bg-indigo-100 px-3 py-2 text-indigo-700 transition-all hover:text-indigo-900 font-semibold",
                "flex items-center gap-3 rounded-lg px-3 py-2 text-gray-500 transition-all hover:text-gray-900 font-medium",
            ),
        ),
        href=item["route"],
        class_name="w-full",
    )


def sidebar() -> rx.Component:
    return rx.fragment(
        rx.el.div(
            rx.el.div(
                rx.el.div(
                    rx.el.div(
                        rx.icon("bike", class_name="h-8 w-8 text-indigo-600"),
                        rx.el.span("MotoParts", class_name="text-xl font-bold"),
                        class_name="flex items-center gap-2 font-semibold",
                    ),
                    rx.el.button(
                        rx.icon("panel-left-close", class_name="h-5 w-5"),
                        on_click=State.toggle_sidebar,
                        class_name="p-2 rounded-full hover:bg-gray-200",
                    ),
                    class_name="flex h-16 items-center justify-between border-b px-4",
                ),
                rx.el.nav(
                    rx.foreach(State.navigation_items, nav_item),
                    class_name="flex flex-col gap-1 p-4",
                ),
                class_name="flex-1 overflow-auto",
            ),
            rx.el.div(
                rx.el.div(
                    rx.image(
                        src=f"https://api.dicebear.com/9.x/initials/svg?seed={State.session_user['username']}",
                        class_name="h-10 w-10 rounded-full",
                    ),
                    rx.el.div(
                        rx.el.p(State.session_user["username"], class_name="font-semibold"),
                        rx.el.p(State.role_label, class_name="text-xs text-gray-500"),
                        class_name="flex flex-col",
                    ),
                    class_name="flex items-center gap-3 p-4",
                ),
                rx.el.button(
                    rx.icon("log-out", class_name="h-5 w-5"),
                    rx.el.span("Sign out"),
                    on_click=State.logout,
                    class_name="flex items-center gap-3 w-full text-left px-4 py-2 text-red-500 hover:bg-red-100",
                ),
                class_name="border-t",
            ),
            class_name=rx.cond(
                State.sidebar_open,
                "flex flex-col h-screen bg-gray-50 border-r transition-all duration-300 w-64 shrink-0",
                "w-0 overflow-hidden transition-all duration-300",
            ),
        ),
        rx.cond(
            ~State.sidebar_open,
            rx.el.button(
                rx.icon("panel-left-open", class_name="h-6 w-6 text-indigo-600"),
                on_click=State.toggle_sidebar,
                class_name="fixed top-4 left-4 z-50 p-2 bg-white rounded-full shadow-md hover:bg-gray-100 border border-gray-200 cursor-pointer",
            ),
            rx.fragment(),
        ),
    )
