"""
Route access rules.

``resolve_redirect`` decides where a navigation must go given the session
state. It runs on every page load (see ``AuthState.check_auth``).
"""
from typing import Optional

LOGIN_ROUTE = "/login"
HOME_ROUTE = "/"

PUBLIC_ROUTES = ("/login", "/signup")

PROTECTED_PREFIXES = (
    "/dashboard",
    "/products",
    "/suppliers",
    "/sales",
    "/brands",
    "/shelf-code",
    "/compatible-models",
    "/low-stock",
    "/daily-sales",
    "/all-sales",
    "/debtors",
    "/reports",
)

ADMIN_PREFIXES = (
    "/users",
    "/expenses",
)

_SKIPPED_PREFIXES = ("/_next", "/_reflex", "/api", "/favicon")


def normalize_path(path: str | None) -> str:
    path = (path or "/").split("?", 1)[0].split("#", 1)[0]
    if not path.startswith("/"):
        path = f"/{path}"
    if len(path) > 1:
        path = path.rstrip("/")
    return path or "/"


def _matches(path: str, prefixes: tuple[str, ...]) -> bool:
    return any(path == prefix or path.startswith(f"{prefix}/") for prefix in prefixes)


def is_skipped(path: str) -> bool:
    """Static assets and API calls are never guarded."""
    path = normalize_path(path)
    if path.startswith(_SKIPPED_PREFIXES):
        return True
    return "." in path.rsplit("/", 1)[-1]


def is_public(path: str) -> bool:
    return _matches(normalize_path(path), PUBLIC_ROUTES)


def is_admin_route(path: str) -> bool:
    return _matches(normalize_path(path), ADMIN_PREFIXES)


def is_protected(path: str) -> bool:
    path = normalize_path(path)
    return path == HOME_ROUTE or _matches(path, PROTECTED_PREFIXES) or is_admin_route(path)


def resolve_redirect(path: str, is_authenticated: bool, is_admin: bool = False) -> Optional[str]:
    """
    Returns the route to redirect to, or None when the path may be shown.

    - public routes: signed-in users go home
    - protected routes: anonymous users go to the login page
    - admin routes: users without the admin role go home
    """
    path = normalize_path(path)
    if is_skipped(path):
        return None
    if is_public(path):
        return HOME_ROUTE if is_authenticated else None
    if is_protected(path):
        if not is_authenticated:
            return LOGIN_ROUTE
        if is_admin_route(path) and not is_admin:
            return HOME_ROUTE
    return None
