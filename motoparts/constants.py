"""
Centralized constants for the dashboard.

Values that depend on the deployment are read from the environment
(see ``.env.example``); invalid values fall back to the defaults.
"""
from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(var_name: str, default: int, minimum: int, maximum: int) -> int:
    raw = (os.getenv(var_name) or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, min(value, maximum))


# =============================================================================
# BACKEND API
# =============================================================================

# Base URL of the REST backend
API_BASE_URL: str = (os.getenv("API_BASE_URL") or "http://localhost:8083").rstrip("/")

# Request timeout (seconds)
API_TIMEOUT_SECONDS: int = _env_int("API_TIMEOUT", 10, 1, 60)

# Name of the session cookie shared with the backend
TOKEN_COOKIE_NAME: str = "token"

# Session cookie lifetime in the browser (seconds)
TOKEN_COOKIE_MAX_AGE: int = 60 * 60 * 24


# =============================================================================
# SEARCH AND PAGINATION
# =============================================================================

# Items per page on list screens
DEFAULT_ITEMS_PER_PAGE: int = 10

# Page numbers shown in the pagination bar (ellipses excluded)
MAX_VISIBLE_PAGES: int = 5

# Keystroke coalescing for search inputs (ms)
SEARCH_DEBOUNCE_MS: int = 500

# Product suggestions shown while composing a sale
PRODUCT_SUGGESTIONS_LIMIT: int = 8

# Page size used when a screen needs the full list (reports, low stock, dropdowns)
FULL_LIST_LIMIT: int = 1000


# =============================================================================
# INVENTORY
# =============================================================================

# Products with 1..threshold units in stock are flagged as low stock
LOW_STOCK_THRESHOLD: int = _env_int("LOW_STOCK_THRESHOLD", 5, 1, 100)


# =============================================================================
# TEXT LIMITS
# =============================================================================

NAME_MAX_LENGTH: int = 100

DESCRIPTION_MAX_LENGTH: int = 500

ADDRESS_MAX_LENGTH: int = 300

SKU_MAX_LENGTH: int = 50

PASSWORD_MIN_LENGTH: int = 6


# =============================================================================
# SALES
# =============================================================================

DEFAULT_CUSTOMER_NAME: str = "Walk-in Customer"

CURRENCY_SYMBOL: str = "Rs. "


# =============================================================================
# INVOICES
# =============================================================================

SHOP_NAME: str = os.getenv("SHOP_NAME") or "MotoParts"

SHOP_ADDRESS: str = os.getenv("SHOP_ADDRESS") or ""

SHOP_PHONE: str = os.getenv("SHOP_PHONE") or ""
