import reflex as rx
from motoparts.state import State
from .sidebar import sidebar


def loading_screen() -> rx.Component:
    return rx.el.div(
        rx.spinner(size="3"),
        rx.el.p("Checking your session...", class_name="text-gray-500"),
        class_name="flex flex-col items-center justify-center gap-3 h-screen w-full bg-gray-100",
    )


def app_layout(*children: rx.Component) -> rx.Component:
    """
    Shell of every signed-in page: sidebar plus scrolling content.

    Nothing but a spinner renders until the route guard has verified the
    session, so protected data never flashes for anonymous visitors.
    """
    return rx.cond(
        State.is_initializing | ~State.is_authenticated,
        loading_screen(),
        rx.el.main(
            rx.el.div(
                sidebar(),
                rx.el.div(
                    rx.el.div(
                        *children,
                        class_name="w-full max-w-7xl mx-auto flex flex-col gap-4 p-4 sm:p-6",
                    ),
                    class_name="flex-1 h-screen overflow-y-auto",
                ),
                class_name="flex min-h-screen w-full bg-gray-100",
            ),
            class_name="font-['Inter']",
        ),
    )


def auth_layout(*children: rx.Component) -> rx.Component:
    return rx.el.main(
        rx.el.div(
            *children,
            class_name="w-full max-w-md bg-white p-8 rounded-xl shadow-lg flex flex-col gap-6",
        ),
        class_name="flex min-h-screen items-center justify-center bg-gray-100 px-4 font-['Inter']",
    )
