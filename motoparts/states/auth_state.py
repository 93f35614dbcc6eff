import reflex as rx
from typing import Any, Dict

from motoparts.api.client import ApiError, ApiValidationError
from motoparts.constants import TOKEN_COOKIE_MAX_AGE, TOKEN_COOKIE_NAME
from motoparts.services.auth_service import AuthService
from motoparts.utils.auth import decode_token, has_role, is_token_expired
from motoparts.utils.logger import get_logger
from motoparts.utils.routes import HOME_ROUTE, LOGIN_ROUTE, is_skipped, resolve_redirect
from motoparts.utils.sanitization import sanitize_email, sanitize_name
from motoparts.utils.validators import validate_credentials, validate_signup_form
from .mixin_state import MixinState
from .types import SessionUser

logger = get_logger("AuthState")

EMPTY_USER: SessionUser = {"username": "", "email": "", "roles": []}

# Backend field names on signup errors -> form field names
SIGNUP_FIELD_MAP = {"userName": "username"}


class AuthState(MixinState):
    token: str = rx.Cookie(
        "",
        name=TOKEN_COOKIE_NAME,
        path="/",
        max_age=TOKEN_COOKIE_MAX_AGE,
        same_site="lax",
    )
    is_authenticated: bool = False
    is_initializing: bool = True
    session_user: SessionUser = EMPTY_USER
    auth_error: str = ""
    signup_errors: Dict[str, str] = {}

    # Reflex only tracks vars read as self.<name> inside a computed var
    @rx.var
    def is_admin(self) -> bool:
        return has_role(self.session_user["roles"], "ADMIN")

    @rx.var
    def role_label(self) -> str:
        return "Admin" if has_role(self.session_user["roles"], "ADMIN") else "User"

    def _apply_user(self, user: Dict[str, Any]):
        self.session_user = {
            "username": user.get("username", ""),
            "email": user.get("email", ""),
            "roles": list(user.get("roles", [])),
        }
        self.is_authenticated = True

    def _clear_session(self):
        self.token = ""
        self.is_authenticated = False
        self.session_user = EMPTY_USER

    def _verify_session(self) -> bool:
        """Asks the backend who owns the cookie; any failure ends the session."""
        token = self.token or ""
        if not token:
            self._clear_session()
            return False
        if decode_token(token) is not None and is_token_expired(token):
            logger.info("Session token expired, skipping verification")
            self._clear_session()
            return False
        try:
            user = AuthService.current_user(self._api(token))
        except ApiError as exc:
            logger.info("Session verification failed: %s", exc.message)
            self._clear_session()
            return False
        self._apply_user(user)
        return True

    @rx.event
    def check_auth(self):
        """Route guard, chained first in every page's ``on_load``."""
        path = self._current_path()
        if hasattr(self, "current_path"):
            self.current_path = path
        if is_skipped(path):
            return
        self._verify_session()
        self.is_initializing = False
        if self.is_authenticated and hasattr(self, "_ensure_low_stock_count"):
            self._ensure_low_stock_count()
        target = resolve_redirect(path, self.is_authenticated, self._has_role("ADMIN"))
        if target:
            return rx.redirect(target)

    @rx.event
    def login(self, form_data: dict):
        email = sanitize_email(form_data.get("email"))
        password = form_data.get("password") or ""
        error = validate_credentials(email, password)
        if error:
            self.auth_error = error
            return
        try:
            token = AuthService.login(self._api(""), email, password)
            user = AuthService.current_user(self._api(token))
        except ApiError as exc:
            logger.info("Login failed for %s: %s", email, exc.message)
            self.auth_error = exc.message
            return
        self.token = token
        self.auth_error = ""
        self._apply_user(user)
        self.is_initializing = False
        logger.info("User %s signed in", user.get("email"))
        return [
            rx.toast(f"Welcome back, {user.get('username')}!", duration=3000),
            rx.redirect(HOME_ROUTE),
        ]

    @rx.event
    def logout(self):
        if self.token:
            try:
                AuthService.logout(self._api())
            except ApiError as exc:
                logger.warning("Logout call failed: %s", exc.message)
        self._clear_session()
        if hasattr(self, "_reset_cart"):
            self._reset_cart()
        if hasattr(self, "_low_stock_loaded"):
            self._low_stock_loaded = False
        return rx.redirect(LOGIN_ROUTE)

    @rx.event
    def signup(self, form_data: dict):
        form = {
            "username": sanitize_name(form_data.get("username")),
            "email": sanitize_email(form_data.get("email")),
            "password": form_data.get("password") or "",
            "confirm_password": form_data.get("confirm_password") or "",
        }
        errors = validate_signup_form(form)
        if errors:
            self.signup_errors = errors
            return
        try:
            AuthService.signup(self._api(""), form["username"], form["email"], form["password"])
        except ApiValidationError as exc:
            self.signup_errors = {
                SIGNUP_FIELD_MAP.get(field, field): message
                for field, message in exc.field_errors.items()
            }
            return
        except ApiError as exc:
            self.signup_errors = {}
            self.auth_error = exc.message
            return
        self.signup_errors = {}
        self.auth_error = ""
        logger.info("Account created for %s", form["email"])
        return [
            rx.toast("Account created. You can sign in now.", duration=3000),
            rx.redirect(LOGIN_ROUTE),
        ]

    @rx.event
    def clear_auth_error(self):
        self.auth_error = ""
        self.signup_errors = {}
