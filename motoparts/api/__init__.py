"""
REST backend access.

Exports the client, its error hierarchy and the response-shape helpers.
"""
from .client import (
    ApiAuthError,
    ApiClient,
    ApiError,
    ApiHttpError,
    ApiNetworkError,
    ApiValidationError,
)
from .envelopes import PageResult, extract_field_errors, parse_page

__all__ = [
    "ApiAuthError",
    "ApiClient",
    "ApiError",
    "ApiHttpError",
    "ApiNetworkError",
    "ApiValidationError",
    "PageResult",
    "extract_field_errors",
    "parse_page",
]
