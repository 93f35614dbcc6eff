import pytest

from motoparts.api.client import (
    NETWORK_ERROR_MESSAGE,
    ApiAuthError,
    ApiNetworkError,
    ApiValidationError,
)
from motoparts.states.products_state import ProductsState


@pytest.fixture
def products_state():
    state = ProductsState()
    state.is_authenticated = True
    state.session_user = {"username": "owner", "email": "owner@shop.pk", "roles": ["ROLE_ADMIN"]}
    state.products_items = []
    state.products_page = 1
    state.products_total_pages = 1
    state.products_search = ""
    state.product_delete_id = 0
    state.close_product_modal()
    return state


def _paged(products, total_pages=1):
    def _respond(params):
        return {
            "data": products,
            "pagination": {
                "currentPage": params["page"],
                "totalPages": total_pages,
                "totalItems": len(products),
                "itemsPerPage": params["limit"],
            },
        }

    return _respond


def test_load_products_fills_page(products_state, fake_api, product_payload):
    fake_api.responses[("GET", "/api/v1/products")] = _paged(
        [product_payload(1), product_payload(2, "Chain Kit")], total_pages=3
    )

    products_state.load_products()

    assert [p["id"] for p in products_state.products_items] == [1, 2]
    assert products_state.products_total_pages == 3
    assert products_state.products_error == ""


def test_search_resets_to_first_page(products_state, fake_api, product_payload):
    fake_api.responses[("GET", "/api/v1/products")] = _paged([product_payload()], total_pages=4)
    products_state.products_page = 3

    products_state.set_products_search("  brake  ")

    assert products_state.products_page == 1
    assert fake_api.calls[-1][2]["name"] == "brake"


def test_load_failure_sets_banner(products_state, fake_api, toasts):
    fake_api.responses[("GET", "/api/v1/products")] = ApiNetworkError(NETWORK_ERROR_MESSAGE)

    result = products_state.load_products()

    assert result == ("toast.error", NETWORK_ERROR_MESSAGE)
    assert products_state.products_error == NETWORK_ERROR_MESSAGE
    assert products_state.products_items == []


def test_expired_session_redirects_to_login(products_state, fake_api, toasts, redirects):
    fake_api.responses[("GET", "/api/v1/products")] = ApiAuthError("Unauthorized", 401)

    result = products_state.load_products()

    assert result[1] == ("redirect", "/login")


def test_deleting_last_row_moves_back_a_page(products_state, fake_api, toasts, product_payload):
    fake_api.responses[("GET", "/api/v1/products")] = _paged([product_payload(1)], total_pages=1)
    products_state.products_page = 2
    products_state.products_total_pages = 2
    products_state.products_items = [{"id": 9, "name": "Old Part"}]

    products_state.ask_delete_product(9)
    result = products_state.delete_product()

    assert fake_api.paths("DELETE") == ["/api/v1/products/9"]
    assert fake_api.calls[-1][2]["page"] == 1
    assert products_state.products_page == 1
    assert products_state.product_delete_id == 0
    assert result == ("toast", "Product deleted.")


def test_delete_without_selection_is_noop(products_state, fake_api):
    assert products_state.delete_product() is None
    assert fake_api.calls == []


def test_save_product_validates_form(products_state, fake_api):
    products_state.product_form = {**products_state.product_form, "name": "Brake Pad"}

    products_state.save_product()

    assert "sku" in products_state.product_errors
    assert "brand_id" in products_state.product_errors
    assert "selling_price" in products_state.product_errors
    assert fake_api.paths("POST") == []


def _fill_form(state):
    for field, value in {
        "name": "Brake Pad",
        "sku": "BP-1",
        "brand_id": "3",
        "shelf_code_id": "",
        "quantity_in_stock": "12",
        "purchase_price": "80",
        "selling_price": "120",
    }.items():
        state.set_product_field(field, value)
    state.toggle_product_model(11)


def test_save_new_product(products_state, fake_api, toasts):
    _fill_form(products_state)
    products_state.product_modal_open = True

    result = products_state.save_product()

    method, path, body = fake_api.calls[0]
    assert (method, path) == ("POST", "/api/v1/products")
    assert body["brandId"] == 3
    assert body["shelfCodeId"] is None
    assert body["compatibleModelIds"] == [11]
    assert body["quantityInStock"] == 12
    assert result == ("toast", "Product added.")
    assert products_state.product_modal_open is False


def test_backend_field_errors_map_to_form_fields(products_state, fake_api):
    _fill_form(products_state)
    fake_api.responses[("POST", "/api/v1/products")] = ApiValidationError(
        "Validation failed", {"sellingPrice": "Selling price must exceed purchase price", "sku": "SKU exists"}
    )

    products_state.save_product()

    assert products_state.product_errors == {
        "selling_price": "Selling price must exceed purchase price",
        "sku": "SKU exists",
    }


def test_edit_prefills_form(products_state, fake_api):
    products_state.open_product_modal(
        {
            "id": 4,
            "name": "Chain Kit",
            "sku": "CK-1",
            "brand_id": 3,
            "shelf_code_id": None,
            "compatible_model_ids": [11, 12],
            "quantity_in_stock": 2,
            "purchase_price": 900.0,
            "selling_price": 1200.0,
        }
    )

    assert products_state.product_modal_open is True
    assert products_state.product_editing_id == 4
    assert products_state.product_form["brand_id"] == "3"
    assert products_state.product_form["shelf_code_id"] == ""
    assert products_state.product_form["compatible_model_ids"] == [11, 12]
    assert "/api/v1/brands" in fake_api.paths("GET")


def test_toggle_model_adds_and_removes(products_state):
    products_state.toggle_product_model(11)
    products_state.toggle_product_model(12)
    products_state.toggle_product_model(11)

    assert products_state.product_form["compatible_model_ids"] == [12]


def test_low_stock_list(products_state, fake_api, product_payload):
    fake_api.responses[("GET", "/api/v1/products")] = [
        product_payload(1, quantity=2),
        product_payload(2, quantity=20),
    ]

    products_state.load_low_stock()

    assert [p["id"] for p in products_state.low_stock_items] == [1]
