import pytest

from motoparts.utils.routes import (
    HOME_ROUTE,
    LOGIN_ROUTE,
    is_admin_route,
    is_skipped,
    normalize_path,
    resolve_redirect,
)


def test_normalize_path_strips_query_and_trailing_slash():
    assert normalize_path("/sales/12/?tab=items") == "/sales/12"
    assert normalize_path("products") == "/products"
    assert normalize_path(None) == "/"


@pytest.mark.parametrize("path", ["/", "/products", "/sales/42", "/debtors/7", "/reports"])
def test_anonymous_users_are_sent_to_login(path):
    assert resolve_redirect(path, is_authenticated=False) == LOGIN_ROUTE


def test_signed_in_users_leave_public_pages():
    assert resolve_redirect("/login", is_authenticated=True) == HOME_ROUTE
    assert resolve_redirect("/signup", is_authenticated=False) is None


def test_admin_routes_require_admin_role():
    assert is_admin_route("/expenses")
    assert resolve_redirect("/users", is_authenticated=True, is_admin=False) == HOME_ROUTE
    assert resolve_redirect("/users", is_authenticated=True, is_admin=True) is None


def test_assets_are_not_guarded():
    assert is_skipped("/favicon.ico")
    assert is_skipped("/_next/static/app.js")
    assert resolve_redirect("/logo.png", is_authenticated=False) is None


def test_unknown_paths_pass_through():
    assert resolve_redirect("/somewhere-else", is_authenticated=False) is None
