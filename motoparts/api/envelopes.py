"""
Response shapes returned by the backend.

List endpoints answer in one of several shapes depending on the resource:

- ``{"data": [...], "pagination": {...}}``
- a bare list
- ``{"data": [...]}`` without pagination
- an object wrapping the list under ``content`` / ``items``

``parse_page`` folds all of them into one ``PageResult``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from motoparts.utils.logger import get_logger
from motoparts.utils.pagination import count_pages

logger = get_logger("ApiEnvelopes")

_META_KEYS = {"message", "error", "status", "timestamp", "path", "success", "data"}


@dataclass
class PageResult:
    items: List[Dict[str, Any]] = field(default_factory=list)
    total_items: int = 0
    total_pages: int = 1
    current_page: int = 1
    per_page: int = 0


def _to_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _rows(value: Any) -> List[Dict[str, Any]]:
    return [row for row in value if isinstance(row, dict)]


def parse_page(payload: Any, page: int = 1, per_page: int = 0) -> PageResult:
    """
    Normalize a list response.

    Args:
        payload: Decoded JSON body
        page: Page that was requested (used when the body has no pagination)
        per_page: Page size that was requested

    Returns:
        PageResult; unknown shapes produce an empty result
    """
    if isinstance(payload, list):
        items = _rows(payload)
        return PageResult(items, len(items), 1, 1, per_page or len(items))

    if not isinstance(payload, dict):
        logger.warning("Unexpected list payload type: %s", type(payload).__name__)
        return PageResult(per_page=per_page)

    data = payload.get("data")
    if data is None:
        data = payload.get("content", payload.get("items"))
    if not isinstance(data, list):
        logger.warning("List payload without data array: keys=%s", sorted(payload))
        return PageResult(per_page=per_page)

    items = _rows(data)
    pagination = payload.get("pagination")
    if not isinstance(pagination, dict):
        return PageResult(items, len(items), 1, 1, per_page or len(items))

    limit = _to_int(pagination.get("itemsPerPage"), per_page or len(items))
    total_items = _to_int(pagination.get("totalItems"), len(items))
    total_pages = _to_int(
        pagination.get("totalPages"), count_pages(total_items, limit or 1)
    )
    current = _to_int(pagination.get("currentPage"), page)
    return PageResult(
        items=items,
        total_items=max(total_items, 0),
        total_pages=max(total_pages, 1),
        current_page=max(current, 1),
        per_page=limit,
    )


def unwrap(payload: Any) -> Any:
    """Returns ``payload["data"]`` for ``{data: ...}`` envelopes, else the payload."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def to_number(payload: Any) -> float:
    """Reads a scalar endpoint (today's expenses, monthly revenue, ...)."""
    value = unwrap(payload)
    if isinstance(value, dict):
        for key in ("total", "amount", "value", "totalSale", "totalAmount"):
            if key in value:
                value = value[key]
                break
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def extract_field_errors(payload: Any) -> Dict[str, str]:
    """
    Field-level validation errors from a 400 body.

    Accepts ``{"data": {field: message}}`` or a top-level ``{field: message}``
    map (envelope keys such as ``message`` and ``status`` are ignored).
    """
    if not isinstance(payload, dict):
        return {}
    data = payload.get("data")
    source = data if isinstance(data, dict) else payload
    return {
        str(key): str(value)
        for key, value in source.items()
        if isinstance(value, str) and (source is data or key not in _META_KEYS)
    }


def error_message(payload: Any, default: str) -> str:
    if isinstance(payload, str) and payload.strip() and not payload.lstrip().startswith("<"):
        return payload.strip()[:300]
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return default
