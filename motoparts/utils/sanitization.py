"""
Input sanitization helpers.

Free text from forms is cleaned before it is sent to the backend:
HTML tags are stripped, whitespace trimmed and length capped.
"""
from __future__ import annotations

import re
from typing import Any

from motoparts.constants import (
    ADDRESS_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    SKU_MAX_LENGTH,
)


def sanitize_text(value: Any, max_length: int = 500) -> str:
    """
    Strips HTML tags and surrounding whitespace, then truncates.

    Args:
        value: Value to clean (converted to str)
        max_length: Maximum length kept

    Returns:
        Cleaned string
    """
    if value is None:
        return ""

    cleaned = str(value).strip()
    if "<" in cleaned and ">" in cleaned:
        cleaned = re.sub(r"<[^>]*>", "", cleaned).strip()

    if len(cleaned) > max_length:
        cleaned = cleaned[:max_length]
    return cleaned


def sanitize_name(value: Any) -> str:
    """Names of products, customers, brands, users."""
    return sanitize_text(value, max_length=NAME_MAX_LENGTH)


def sanitize_description(value: Any) -> str:
    return sanitize_text(value, max_length=DESCRIPTION_MAX_LENGTH)


def sanitize_address(value: Any) -> str:
    return sanitize_text(value, max_length=ADDRESS_MAX_LENGTH)


def sanitize_phone(value: Any) -> str:
    """
    Keeps only digits, spaces, parentheses, dashes and ``+``.
    """
    if value is None:
        return ""
    cleaned = re.sub(r"[^\d\s\-+()]", "", str(value).strip())
    return cleaned[:20]


def sanitize_sku(value: Any) -> str:
    """SKUs and shelf codes: letters, digits, dashes, dots and slashes, upper-cased."""
    if value is None:
        return ""
    cleaned = str(value).strip().upper()
    cleaned = re.sub(r"[^A-Z0-9\-./_]", "", cleaned)
    return cleaned[:SKU_MAX_LENGTH]


def sanitize_email(value: Any) -> str:
    if value is None:
        return ""
    return re.sub(r"\s", "", str(value)).lower()[:NAME_MAX_LENGTH]


def sanitize_search(value: Any) -> str:
    """Search terms keep inner spaces but lose tags and edge whitespace."""
    return sanitize_text(value, max_length=NAME_MAX_LENGTH)
