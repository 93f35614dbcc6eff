from types import SimpleNamespace

import pytest

from motoparts.api.client import ApiValidationError
from motoparts.states.sales_history_state import SalesHistoryState


@pytest.fixture
def history_state():
    state = SalesHistoryState()
    state.is_authenticated = True
    state.sales_page = 1
    state.sales_total_pages = 1
    state.sales_sort_by = "createdAt"
    state.sales_sort_direction = "desc"
    state.sales_status_filter = ""
    state.sale_lines_items = []
    state.sale_lines_page = 1
    state.sale_lines_total_pages = 1
    state.sale_line_delete_id = 0
    state.close_sale_line_editor()
    return state


def test_sort_sales_toggles_and_resets_page(history_state, fake_api):
    history_state.sales_page = 3

    history_state.sort_sales("createdAt")
    assert history_state.sales_sort_direction == "asc"
    assert history_state.sales_page == 1

    history_state.sort_sales("customerName")
    params = fake_api.calls[-1][2]
    assert params["sortBy"] == "customerName"
    assert params["sortDirection"] == "desc"


def test_unknown_sort_field_is_ignored(history_state, fake_api):
    history_state.sort_sales("profit")

    assert history_state.sales_sort_by == "createdAt"
    assert fake_api.calls == []


def test_status_filter_all_clears_filter(history_state, fake_api):
    history_state.set_sales_status_filter("UNPAID")
    assert fake_api.calls[-1][2]["status"] == "UNPAID"

    history_state.set_sales_status_filter("ALL")
    assert history_state.sales_status_filter == ""


def test_load_sale_detail_from_route(history_state, fake_api):
    history_state.router = SimpleNamespace(url=SimpleNamespace(path="/sales/42"))
    fake_api.responses[("GET", "/api/v1/sales-summary/42")] = {
        "id": 42, "customerName": "Ahmed", "totalAmountSummary": 700, "paymentStatus": "PAID",
    }

    history_state.load_sale_detail()

    assert history_state.sale_detail["id"] == 42
    assert history_state.sale_detail["paid_amount"] == 700.0


def test_save_sale_line_recomputes_total(history_state, fake_api, toasts):
    history_state.open_sale_line_editor(
        {"id": 3, "product_id": 5, "product_name": "Clutch Cable", "sku": "CC-5",
         "unit_price": 150.0, "quantity_sold": 2}
    )
    history_state.set_sale_line_quantity("3")

    result = history_state.save_sale_line()

    assert fake_api.calls[0] == (
        "PUT",
        "/api/v1/sales/3",
        {
            "id": 3,
            "product": {"id": 5, "productName": "Clutch Cable", "sku": "CC-5"},
            "quantitySold": 3,
            "totalPrice": 450.0,
        },
    )
    assert history_state.sale_line_editing == {}
    assert result == ("toast", "Sale item updated.")


def test_save_sale_line_rejects_zero(history_state, fake_api):
    history_state.open_sale_line_editor({"id": 3, "quantity_sold": 2})
    history_state.set_sale_line_quantity("0")

    history_state.save_sale_line()

    assert history_state.sale_line_errors == {"quantity": "Quantity must be at least 1."}
    assert fake_api.calls == []


def test_save_sale_line_backend_error(history_state, fake_api):
    fake_api.responses[("PUT", "/api/v1/sales/3")] = ApiValidationError(
        "Validation failed", {"quantitySold": "Not enough stock"}
    )
    history_state.open_sale_line_editor({"id": 3, "product_id": 5, "quantity_sold": 2, "unit_price": 10})
    history_state.set_sale_line_quantity("9")

    history_state.save_sale_line()

    assert history_state.sale_line_errors == {"quantity": "Not enough stock"}


def test_delete_sale_line(history_state, fake_api, toasts):
    history_state.sale_lines_items = [{"id": 3}, {"id": 4}]

    history_state.ask_delete_sale_line(3)
    result = history_state.delete_sale_line()

    assert fake_api.paths("DELETE") == ["/api/v1/sales/3"]
    assert result == ("toast", "Sale item deleted.")
