"""HTTP client for the REST backend.

``ApiClient`` sends requests to ``API_BASE_URL`` through one pooled
``requests.Session`` per worker. The session token travels as the ``token``
cookie on each request; the pooled session never stores cookies, so one
user's token is never replayed for another. Every call returns the decoded
JSON body (``None`` for an empty body) or raises one of the ``ApiError``
subclasses below.

Example::

    client = ApiClient(token=state.token)
    page = client.get("/api/v1/products", params={"page": 1, "limit": 10})
"""
from __future__ import annotations

from http.cookiejar import DefaultCookiePolicy
from typing import Any

import requests

from motoparts.constants import API_BASE_URL, API_TIMEOUT_SECONDS, TOKEN_COOKIE_NAME
from motoparts.utils.logger import get_logger

from .envelopes import error_message, extract_field_errors

logger = get_logger("ApiClient")

NETWORK_ERROR_MESSAGE = "Network error. Please check if the server is running."

_shared_session: requests.Session | None = None


def shared_session() -> requests.Session:
    """Connection pool reused by every client of this worker process."""
    global _shared_session
    if _shared_session is None:
        session = requests.Session()
        session.headers.update({"Accept": "application/json"})
        session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        _shared_session = session
    return _shared_session


class ApiError(Exception):
    """Base error for every failed backend call."""

    def __init__(self, message: str, status_code: int | None = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class ApiNetworkError(ApiError):
    """Connection refused, DNS failure or timeout."""


class ApiHttpError(ApiError):
    """Non-2xx response."""


class ApiAuthError(ApiHttpError):
    """401/403: the session is missing, expired or lacks the role."""


class ApiValidationError(ApiHttpError):
    """400 with a ``{field: message}`` map."""

    def __init__(
        self,
        message: str,
        field_errors: dict[str, str],
        status_code: int | None = 400,
        payload: Any = None,
    ):
        super().__init__(message, status_code=status_code, payload=payload)
        self.field_errors = field_errors


class ApiClient:
    def __init__(
        self,
        token: str = "",
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token = token or ""
        self.session = session if session is not None else shared_session()
        # Cookies set by the last response (the login call sets ``token``)
        self.last_cookies: dict[str, str] = {}

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        query = {
            key: value for key, value in (params or {}).items() if value not in (None, "")
        }
        cookies = {TOKEN_COOKIE_NAME: self.token} if self.token else None
        try:
            response = self.session.request(
                method,
                url,
                params=query or None,
                json=json,
                cookies=cookies,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise ApiNetworkError(NETWORK_ERROR_MESSAGE) from exc

        self.last_cookies = requests.utils.dict_from_cookiejar(response.cookies)
        payload = self._decode(response)
        if response.ok:
            return payload
        raise self._error_for(method, path, response.status_code, payload)

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def patch(self, path: str, json: Any = None) -> Any:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _error_for(method: str, path: str, status_code: int, payload: Any) -> ApiError:
        message = error_message(payload, f"Request failed ({status_code}).")
        if status_code in (401, 403):
            logger.info("%s %s rejected with %s", method, path, status_code)
            return ApiAuthError(message, status_code=status_code, payload=payload)
        if status_code == 400:
            field_errors = extract_field_errors(payload)
            if field_errors:
                logger.info("%s %s validation failed: %s", method, path, sorted(field_errors))
                return ApiValidationError(
                    message, field_errors, status_code=status_code, payload=payload
                )
        logger.warning("%s %s returned %s: %s", method, path, status_code, message)
        return ApiHttpError(message, status_code=status_code, payload=payload)
