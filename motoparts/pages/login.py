import reflex as rx
from motoparts.components import auth_layout
from motoparts.state import State

INPUT_CLASS = (
    "mt-1 block w-full px-3 py-2 bg-white border border-gray-300 rounded-md shadow-sm "
    "placeholder-gray-400 focus:outline-none focus:ring-indigo-500 focus:border-indigo-500 sm:text-sm"
)


def brand_header(subtitle: str) -> rx.Component:
    return rx.el.div(
        rx.el.div(
            rx.icon("bike", class_name="h-10 w-10 text-indigo-600"),
            rx.el.h1("MotoParts", class_name="text-3xl font-bold text-gray-800"),
            class_name="flex items-center justify-center gap-3",
        ),
        rx.el.p(subtitle, class_name="text-center text-sm text-gray-500"),
        class_name="flex flex-col gap-2",
    )


def auth_error_box() -> rx.Component:
    return rx.cond(
        State.auth_error != "",
        rx.el.div(
            rx.icon("circle-alert", class_name="h-5 w-5 text-red-500"),
            rx.el.p(State.auth_error, class_name="text-sm text-red-700"),
            class_name="flex items-center gap-2 bg-red-100 p-3 rounded-md border border-red-200",
        ),
        rx.fragment(),
    )


def login_page() -> rx.Component:
    return auth_layout(
        brand_header("Sign in to manage the shop"),
        rx.el.form(
            rx.el.div(
                rx.el.label("Email", class_name="block text-sm font-medium text-gray-700"),
                rx.el.input(
                    placeholder="you@example.com",
                    name="email",
                    type="email",
                    on_focus=State.clear_auth_error,
                    class_name=INPUT_CLASS,
                ),
                class_name="mb-4",
            ),
            rx.el.div(
                rx.el.label("Password", class_name="block text-sm font-medium text-gray-700"),
                rx.el.input(
                    placeholder="••••••••",
                    name="password",
                    type="password",
                    class_name=INPUT_CLASS,
                ),
                class_name="mb-6",
            ),
            rx.el.button(
                "Sign in",
                type="submit",
                class_name="w-full flex justify-center py-2 px-4 rounded-md shadow-sm text-sm font-medium text-white bg-indigo-600 hover:bg-indigo-700 min-h-[44px]",
            ),
            on_submit=State.login,
        ),
        auth_error_box(),
        rx.el.p(
            "No account yet? ",
            rx.el.a("Create one", href="/signup", class_name="text-indigo-600 font-medium hover:underline"),
            class_name="text-center text-sm text-gray-600",
        ),
    )
