from typing import Any

import pytest
import reflex as rx

from motoparts.api.client import ApiError
from motoparts.states.mixin_state import MixinState


class FakeApiClient:
    """Stands in for ``ApiClient``: canned responses keyed by (method, path)."""

    def __init__(self, responses: dict | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, str, Any]] = []
        self.last_cookies: dict[str, str] = {}
        self.token = ""

    def _respond(self, method: str, path: str, payload: Any = None) -> Any:
        self.calls.append((method, path, payload))
        response = self.responses.get((method, path))
        if isinstance(response, ApiError):
            raise response
        if callable(response):
            return response(payload)
        if response is None and method == "GET":
            return []
        return response

    def get(self, path, params=None):
        return self._respond("GET", path, params)

    def post(self, path, json=None):
        return self._respond("POST", path, json)

    def put(self, path, json=None):
        return self._respond("PUT", path, json)

    def patch(self, path, json=None):
        return self._respond("PATCH", path, json)

    def delete(self, path):
        return self._respond("DELETE", path)

    def paths(self, method: str | None = None) -> list[str]:
        return [path for m, path, _ in self.calls if method is None or m == method]


class ToastRecorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def __call__(self, message, *args, **kwargs):
        self.calls.append(("info", message))
        return ("toast", message)

    def error(self, message, *args, **kwargs):
        self.calls.append(("error", message))
        return ("toast.error", message)

    def success(self, message, *args, **kwargs):
        self.calls.append(("success", message))
        return ("toast.success", message)

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.calls]


@pytest.fixture
def fake_api(monkeypatch):
    client = FakeApiClient()
    monkeypatch.setattr(MixinState, "_api", lambda self, token=None: client)
    return client


@pytest.fixture
def toasts(monkeypatch):
    recorder = ToastRecorder()
    monkeypatch.setattr(rx, "toast", recorder)
    return recorder


@pytest.fixture
def redirects(monkeypatch):
    monkeypatch.setattr(rx, "redirect", lambda path, *args, **kwargs: ("redirect", path))


@pytest.fixture
def downloads(monkeypatch):
    captured = []

    def _download(data=None, filename=None, **kwargs):
        captured.append({"data": data, "filename": filename})
        return ("download", filename)

    monkeypatch.setattr(rx, "download", _download)
    return captured


@pytest.fixture
def admin_user():
    return {"username": "owner", "email": "owner@shop.pk", "roles": ["ROLE_ADMIN"]}


@pytest.fixture
def staff_user():
    return {"username": "clerk", "email": "clerk@shop.pk", "roles": ["ROLE_USER"]}


@pytest.fixture
def product_payload():
    def _factory(product_id=1, name="Brake Pad", quantity=10, price=100, **extra):
        payload = {
            "id": product_id,
            "name": name,
            "sku": f"SKU-{product_id}",
            "description": "",
            "brandId": 3,
            "brandName": "Honda",
            "shelfCodeId": 7,
            "shelfCodeName": "A1",
            "compatibleModels": [{"id": 11, "name": "CD 70"}],
            "quantityInStock": quantity,
            "purchasePrice": price * 0.8,
            "sellingPrice": price,
        }
        payload.update(extra)
        return payload

    return _factory


@pytest.fixture
def api_factory():
    """Builds standalone fake clients for service-level tests."""
    return FakeApiClient
