import pytest
import requests

from motoparts.api.client import (
    NETWORK_ERROR_MESSAGE,
    ApiAuthError,
    ApiClient,
    ApiHttpError,
    ApiNetworkError,
    ApiValidationError,
    shared_session,
)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, cookies=None):
        self.status_code = status_code
        self._payload = payload
        self.content = b"" if payload is None else b"{}"
        self.cookies = requests.cookies.cookiejar_from_dict(cookies or {})

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response
        self.error = error
        self.requests = []

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def _client(response=None, error=None, token="abc"):
    session = FakeSession(response, error)
    return ApiClient(token=token, base_url="http://api.test/", session=session), session


def test_token_travels_as_cookie_and_blank_params_are_dropped():
    client, session = _client(FakeResponse(payload={"data": []}))

    client.get("/api/v1/products", params={"page": 1, "name": "", "brand": None})

    method, url, kwargs = session.requests[0]
    assert method == "GET"
    assert url == "http://api.test/api/v1/products"
    assert kwargs["params"] == {"page": 1}
    assert kwargs["cookies"] == {"token": "abc"}


def test_anonymous_client_sends_no_cookie():
    client, session = _client(FakeResponse(payload={}), token="")

    client.post("/api/auth/login", json={"email": "a@b.co"})

    assert session.requests[0][2]["cookies"] is None


def test_empty_body_decodes_to_none():
    client, _ = _client(FakeResponse(status_code=204))

    assert client.delete("/api/v1/brands/3") is None


def test_login_cookie_is_exposed():
    client, _ = _client(FakeResponse(payload={"message": "ok"}, cookies={"token": "jwt-value"}))

    client.post("/api/auth/login")

    assert client.last_cookies == {"token": "jwt-value"}


def test_network_failure_raises_network_error():
    client, _ = _client(error=requests.ConnectionError("refused"))

    with pytest.raises(ApiNetworkError) as exc_info:
        client.get("/api/auth/me")

    assert exc_info.value.message == NETWORK_ERROR_MESSAGE


def test_unauthorized_raises_auth_error():
    client, _ = _client(FakeResponse(status_code=401, payload={"message": "Unauthorized"}))

    with pytest.raises(ApiAuthError) as exc_info:
        client.get("/api/auth/me")

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Unauthorized"


def test_bad_request_with_field_map_raises_validation_error():
    payload = {"message": "Validation failed", "data": {"sku": "SKU already exists"}}
    client, _ = _client(FakeResponse(status_code=400, payload=payload))

    with pytest.raises(ApiValidationError) as exc_info:
        client.post("/api/v1/products", json={})

    assert exc_info.value.field_errors == {"sku": "SKU already exists"}


def test_server_error_raises_http_error_with_default_message():
    client, _ = _client(FakeResponse(status_code=500, payload={}))

    with pytest.raises(ApiHttpError) as exc_info:
        client.get("/api/v1/sales")

    assert exc_info.value.message == "Request failed (500)."
    assert not isinstance(exc_info.value, ApiValidationError)


def test_clients_share_one_cookieless_session():
    first, second = ApiClient(token="a"), ApiClient(token="b")

    assert first.session is second.session is shared_session()
    assert first.session.headers["Accept"] == "application/json"
    assert first.session.cookies._policy.is_not_allowed("api.test")
