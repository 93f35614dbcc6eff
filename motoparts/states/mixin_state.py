"""Base mixin and decorators shared by every state.

Decorators:
    @require_login: skips the handler while no session is verified
    @require_admin(message): requires the ``ROLE_ADMIN`` role

Class MixinState:
    Helpers used by all screens:
    - the API client bound to the session cookie
    - turning an ``ApiError`` into a banner, a log line and a toast
    - copying a ``PageResult`` onto a screen's pagination vars
    - reading the current path and dynamic route ids

Example::

    from motoparts.states import require_admin
    from motoparts.states.mixin_state import MixinState

    class ExpensesState(MixinState):
        @rx.event
        @require_admin("Only admins can manage expenses.")
        def delete_expense(self, expense_id: int):
            ...
"""
import functools
from typing import Any, Callable, Dict, List, Tuple, TypeVar

import reflex as rx

from motoparts.api.client import ApiAuthError, ApiClient, ApiError
from motoparts.api.envelopes import PageResult
from motoparts.services.product_service import ProductService
from motoparts.utils.auth import has_role
from motoparts.utils.formatting import format_currency, round_currency
from motoparts.utils.logger import get_logger
from motoparts.utils.pagination import clamp_page
from motoparts.utils.routes import LOGIN_ROUTE, normalize_path
from motoparts.utils.sanitization import sanitize_search

F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger("States")

SESSION_EXPIRED_MESSAGE = "Your session has expired. Please sign in again."
ADMIN_ONLY_MESSAGE = "Only administrators can do this."


def require_login(method: F) -> F:
    """
    Runs the handler only for a verified session.

    Page loaders are chained after ``check_auth``; when the guard has just
    redirected to the login page the loader becomes a no-op.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if not getattr(self, "is_authenticated", False):
            return None
        return method(self, *args, **kwargs)

    return wrapper  # type: ignore


def require_admin(message: str | None = None, silent: bool = False) -> Callable[[F], F]:
    """
    Runs the handler only for users holding ``ROLE_ADMIN``.

    Args:
        message: Toast text for non-admins
        silent: Skip without a toast (used by page loaders, the route
            guard already redirects)
    """

    def decorator(method: F) -> F:
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            if not getattr(self, "is_authenticated", False):
                return None
            if not self._has_role("ADMIN"):
                if silent:
                    return None
                return rx.toast(message or ADMIN_ONLY_MESSAGE, duration=3000)
            return method(self, *args, **kwargs)

        return wrapper  # type: ignore

    return decorator


class MixinState:
    def _api(self, token: str | None = None) -> ApiClient:
        if token is None:
            token = getattr(self, "token", "") or ""
        return ApiClient(token=token)

    def _has_role(self, role: str) -> bool:
        return has_role(getattr(self, "session_user", {}).get("roles"), role)

    def _round_currency(self, value: float) -> float:
        return round_currency(value)

    def _format_currency(self, value: float) -> str:
        return format_currency(value)

    def _current_path(self) -> str:
        router = getattr(self, "router", None)
        url = getattr(router, "url", None)
        path = getattr(url, "path", None)
        if path is None:
            page = getattr(router, "page", None)
            path = getattr(page, "raw_path", None) or getattr(page, "path", None)
        return normalize_path(path or "/")

    def _path_id(self) -> int | None:
        """Numeric id from the last path segment (``/sales/42`` -> 42)."""
        segment = self._current_path().rstrip("/").rsplit("/", 1)[-1]
        return int(segment) if segment.isdigit() else None

    def _apply_page(self, prefix: str, result: PageResult):
        setattr(self, f"{prefix}_items", result.items)
        setattr(self, f"{prefix}_total_items", result.total_items)
        setattr(self, f"{prefix}_total_pages", result.total_pages)
        setattr(self, f"{prefix}_page", clamp_page(result.current_page, result.total_pages))

    def _api_failure(self, exc: ApiError, prefix: str | None = None, context: str = ""):
        """
        Reports a failed backend call.

        Sets ``<prefix>_error`` (the screen's banner) when a prefix is given.
        A 401 ends the session and sends the user to the login page.
        """
        logger.warning("%s failed: %s", context or prefix or "request", exc.message)
        if prefix:
            setattr(self, f"{prefix}_error", exc.message)
        if isinstance(exc, ApiAuthError) and exc.status_code == 401:
            if hasattr(self, "_clear_session"):
                self._clear_session()
            return [
                rx.toast.error(SESSION_EXPIRED_MESSAGE, duration=4000),
                rx.redirect(LOGIN_ROUTE),
            ]
        return rx.toast.error(exc.message, duration=4000)

    def _search_products(self, value: str) -> Tuple[List[Dict[str, Any]], Any]:
        """In-stock products matching a cart search; returns (rows, failure event)."""
        term = sanitize_search(value)
        if not term:
            return [], None
        try:
            return ProductService.search_in_stock(self._api(), term), None
        except ApiError as exc:
            return [], self._api_failure(exc, context="Product search")
