from motoparts.api.client import ApiNetworkError
from motoparts.states.ui_state import NAVIGATION_ITEMS, UIState


def test_staff_navigation_hides_admin_pages():
    routes = [item["route"] for item in UIState()._navigation_for(False)]

    assert "/expenses" not in routes
    assert "/users" not in routes
    assert "/debtors" in routes


def test_admin_navigation_lists_everything():
    items = UIState()._navigation_for(True)

    assert len(items) == len(NAVIGATION_ITEMS)
    assert all("admin" not in item for item in items)


def test_low_stock_count_is_loaded_once(fake_api, product_payload):
    fake_api.responses[("GET", "/api/v1/products")] = [
        product_payload(1, quantity=1),
        product_payload(2, quantity=50),
    ]
    state = UIState()
    state.low_stock_count = 0
    state._low_stock_loaded = False

    state._ensure_low_stock_count()
    state._ensure_low_stock_count()

    assert state.low_stock_count == 1
    assert len(fake_api.paths("GET")) == 1


def test_low_stock_count_failure_is_retried(fake_api):
    fake_api.responses[("GET", "/api/v1/products")] = ApiNetworkError("down")
    state = UIState()
    state.low_stock_count = 3
    state._low_stock_loaded = False

    state._ensure_low_stock_count()

    assert state.low_stock_count == 3
    assert state._low_stock_loaded is False
