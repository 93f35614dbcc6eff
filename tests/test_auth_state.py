from types import SimpleNamespace

import pytest

from motoparts.api.client import ApiAuthError, ApiValidationError
from motoparts.states.auth_state import AuthState


def _at(path: str) -> AuthState:
    state = AuthState()
    state.router = SimpleNamespace(url=SimpleNamespace(path=path))
    state.token = ""
    state.is_authenticated = False
    state.is_initializing = True
    state.session_user = {"username": "", "email": "", "roles": []}
    state.auth_error = ""
    state.signup_errors = {}
    return state


@pytest.fixture
def me_endpoint(fake_api):
    fake_api.responses[("GET", "/api/auth/me")] = {
        "data": {"username": "owner@shop.pk", "role": ["ROLE_ADMIN"]}
    }
    return fake_api


def test_anonymous_user_is_sent_to_login(fake_api, redirects):
    state = _at("/products")

    result = state.check_auth()

    assert result == ("redirect", "/login")
    assert state.is_authenticated is False
    assert state.is_initializing is False
    assert fake_api.calls == []


def test_public_page_stays_open_for_anonymous_user(fake_api, redirects):
    state = _at("/signup")

    assert state.check_auth() is None


def test_valid_session_is_restored(me_endpoint, redirects):
    state = _at("/products")
    state.token = "opaque-token"

    result = state.check_auth()

    assert result is None
    assert state.is_authenticated is True
    assert state.session_user["username"] == "owner"
    assert state._has_role("ADMIN")


def test_signed_in_user_leaves_login_page(me_endpoint, redirects):
    state = _at("/login")
    state.token = "opaque-token"

    assert state.check_auth() == ("redirect", "/")


def test_non_admin_is_kept_out_of_admin_pages(fake_api, redirects):
    fake_api.responses[("GET", "/api/auth/me")] = {"username": "clerk@shop.pk", "role": "ROLE_USER"}
    state = _at("/expenses")
    state.token = "opaque-token"

    assert state.check_auth() == ("redirect", "/")


def test_rejected_token_clears_session(fake_api, redirects):
    fake_api.responses[("GET", "/api/auth/me")] = ApiAuthError("Unauthorized", 401)
    state = _at("/sales")
    state.token = "stale-token"

    result = state.check_auth()

    assert result == ("redirect", "/login")
    assert state.token == ""
    assert state.is_authenticated is False


def test_login_stores_token_and_user(fake_api, toasts, redirects):
    fake_api.responses[("POST", "/api/auth/login")] = {"token": "fresh-token"}
    fake_api.responses[("GET", "/api/auth/me")] = {"username": "owner@shop.pk", "roles": ["ROLE_ADMIN"]}
    state = _at("/login")

    result = state.login({"email": " Owner@Shop.pk ", "password": "secret1"})

    assert result == [("toast", "Welcome back, owner!"), ("redirect", "/")]
    assert state.token == "fresh-token"
    assert state.is_authenticated is True
    assert fake_api.calls[0][2] == {"email": "owner@shop.pk", "password": "secret1"}


def test_login_requires_both_fields(fake_api):
    state = _at("/login")

    state.login({"email": "", "password": ""})

    assert state.auth_error == "Email and password are required."
    assert fake_api.calls == []


def test_login_failure_shows_backend_message(fake_api):
    fake_api.responses[("POST", "/api/auth/login")] = ApiAuthError("Invalid credentials", 401)
    state = _at("/login")

    state.login({"email": "owner@shop.pk", "password": "wrong-pass"})

    assert state.auth_error == "Invalid credentials"
    assert state.is_authenticated is False


def test_logout_clears_session(fake_api, redirects):
    state = _at("/")
    state.token = "fresh-token"
    state.is_authenticated = True

    result = state.logout()

    assert result == ("redirect", "/login")
    assert fake_api.paths("POST") == ["/api/auth/logout"]
    assert state.token == ""
    assert state.is_authenticated is False


def test_signup_validates_before_calling_backend(fake_api):
    state = _at("/signup")

    state.signup({"username": "al", "email": "bad", "password": "123", "confirm_password": "123"})

    assert set(state.signup_errors) == {"username", "email", "password"}
    assert fake_api.calls == []


def test_signup_maps_backend_field_errors(fake_api):
    fake_api.responses[("POST", "/api/auth/signup")] = ApiValidationError(
        "Validation failed", {"userName": "Username already taken"}
    )
    state = _at("/signup")

    state.signup(
        {"username": "owner", "email": "owner@shop.pk", "password": "secret1", "confirm_password": "secret1"}
    )

    assert state.signup_errors == {"username": "Username already taken"}


def test_signup_success_redirects_to_login(fake_api, toasts, redirects):
    state = _at("/signup")

    result = state.signup(
        {"username": "owner", "email": "owner@shop.pk", "password": "secret1", "confirm_password": "secret1"}
    )

    assert result == [("toast", "Account created. You can sign in now."), ("redirect", "/login")]
    assert fake_api.calls[0][2] == {"userName": "owner", "email": "owner@shop.pk", "password": "secret1"}
