import reflex as rx
from motoparts.components import auth_layout, field_error
from motoparts.state import State
from .login import INPUT_CLASS, auth_error_box, brand_header


def _signup_field(label: str, name: str, input_type: str = "text", placeholder: str = "") -> rx.Component:
    return rx.el.div(
        rx.el.label(label, class_name="block text-sm font-medium text-gray-700"),
        rx.el.input(
            name=name,
            type=input_type,
            placeholder=placeholder,
            class_name=INPUT_CLASS,
        ),
        field_error(State.signup_errors, name),
        class_name="mb-4",
    )


def signup_page() -> rx.Component:
    return auth_layout(
        brand_header("Create a staff account"),
        rx.el.form(
            _signup_field("Username", "username", placeholder="rider01"),
            _signup_field("Email", "email", "email", "you@example.com"),
            _signup_field("Password", "password", "password", "••••••••"),
            _signup_field("Confirm password", "confirm_password", "password", "••••••••"),
            rx.el.button(
                "Create account",
                type="submit",
                class_name="w-full flex justify-center py-2 px-4 rounded-md shadow-sm text-sm font-medium text-white bg-indigo-600 hover:bg-indigo-700 min-h-[44px]",
            ),
            on_submit=State.signup,
        ),
        auth_error_box(),
        rx.el.p(
            "Already registered? ",
            rx.el.a("Sign in", href="/login", class_name="text-indigo-600 font-medium hover:underline"),
            class_name="text-center text-sm text-gray-600",
        ),
    )
