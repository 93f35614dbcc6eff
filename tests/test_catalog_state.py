from types import SimpleNamespace

import pytest

from motoparts.api.client import ApiValidationError
from motoparts.states.catalog_state import CatalogState, filter_entries
from motoparts.states.suppliers_state import SuppliersState


def _catalog_at(path):
    state = CatalogState()
    state.is_authenticated = True
    state.router = SimpleNamespace(url=SimpleNamespace(path=path))
    state.catalog_kind = "brands"
    state.catalog_items = []
    state.catalog_search = ""
    state.catalog_page = 1
    state.catalog_delete_id = 0
    state.close_catalog_modal()
    return state


def test_filter_entries_matches_name_or_description():
    entries = [
        {"id": 1, "name": "Honda", "description": "Japanese"},
        {"id": 2, "name": "Suzuki", "description": ""},
    ]

    assert [e["id"] for e in filter_entries(entries, "jap")] == [1]
    assert [e["id"] for e in filter_entries(entries, " ")] == [1, 2]


def test_route_selects_catalog(fake_api):
    fake_api.responses[("GET", "/api/v1/shelf")] = [{"id": 4, "code": "B2"}, {"id": 3, "code": "a1"}]
    state = _catalog_at("/shelf-code")
    state.catalog_search = "old"
    state.catalog_page = 2

    state.load_catalog()

    assert state.catalog_kind == "shelf_codes"
    assert [e["name"] for e in state.catalog_items] == ["a1", "B2"]
    assert state.catalog_search == ""
    assert state.catalog_page == 1


def test_save_requires_name(fake_api):
    state = _catalog_at("/compatible-models")
    state.catalog_kind = "compatible_models"
    state.set_catalog_field("name", "   ")

    state.save_catalog_entry()

    assert state.catalog_errors == {"name": "Compatible model name is required."}
    assert fake_api.calls == []


def test_save_new_brand(fake_api, toasts):
    state = _catalog_at("/brands")
    state.open_catalog_modal()
    state.set_catalog_field("name", "Yamaha")
    state.set_catalog_field("description", "Tuning forks")

    result = state.save_catalog_entry()

    assert fake_api.calls[0] == (
        "POST", "/api/v1/brands", {"name": "Yamaha", "description": "Tuning forks"}
    )
    assert result == ("toast", "Brand added.")
    assert state.catalog_modal_open is False


def test_shelf_code_error_maps_to_name(fake_api):
    fake_api.responses[("PUT", "/api/v1/shelf/4")] = ApiValidationError(
        "Validation failed", {"code": "Shelf code already exists"}
    )
    state = _catalog_at("/shelf-code")
    state.catalog_kind = "shelf_codes"
    state.open_catalog_modal({"id": 4, "name": "B2", "description": ""})
    state.set_catalog_field("name", "A1")

    state.save_catalog_entry()

    assert state.catalog_errors == {"name": "Shelf code already exists"}
    assert state.catalog_modal_open is True


def test_delete_entry(fake_api, toasts):
    state = _catalog_at("/brands")
    state.catalog_items = [{"id": 1, "name": "Honda", "description": ""}]

    state.ask_delete_catalog_entry(1)
    result = state.delete_catalog_entry()

    assert fake_api.paths("DELETE") == ["/api/v1/brands/1"]
    assert result == ("toast", "Brand deleted.")


@pytest.fixture
def suppliers_state():
    state = SuppliersState()
    state.is_authenticated = True
    state.supplier_items = []
    state.supplier_page = 1
    state.supplier_total_pages = 1
    state.supplier_search = ""
    state.supplier_delete_id = 0
    state.close_supplier_modal()
    return state


def test_supplier_search_goes_to_server(suppliers_state, fake_api):
    suppliers_state.set_supplier_search("traders")

    assert fake_api.calls[0][1] == "/api/v1/suppliers"
    assert fake_api.calls[0][2]["search"] == "traders"


def test_save_supplier_validates(suppliers_state, fake_api):
    suppliers_state.set_supplier_field("name", "Al")
    suppliers_state.set_supplier_field("phone", "call me")

    suppliers_state.save_supplier()

    assert set(suppliers_state.supplier_errors) >= {"name", "company_name", "phone"}
    assert fake_api.calls == []


def test_update_supplier(suppliers_state, fake_api, toasts):
    suppliers_state.open_supplier_modal(
        {"id": 6, "name": "Bilal Khan", "company_name": "BK Autos", "phone": "0300-1112223",
         "email": "", "address": "Lahore"}
    )
    suppliers_state.set_supplier_field("email", "Sales@BK.pk")

    result = suppliers_state.save_supplier()

    method, path, body = fake_api.calls[0]
    assert (method, path) == ("PUT", "/api/v1/suppliers/6")
    assert body["contactPerson"] == "Bilal Khan"
    assert body["company"] == "BK Autos"
    assert body["email"] == "sales@bk.pk"
    assert result == ("toast", "Supplier updated.")


def test_supplier_backend_errors_map_to_fields(suppliers_state, fake_api):
    fake_api.responses[("POST", "/api/v1/suppliers")] = ApiValidationError(
        "Validation failed", {"phoneNumber": "Phone already registered"}
    )
    suppliers_state.open_supplier_modal()
    for field, value in {"name": "Bilal Khan", "company_name": "BK Autos", "phone": "0300"}.items():
        suppliers_state.set_supplier_field(field, value)

    suppliers_state.save_supplier()

    assert suppliers_state.supplier_errors == {"phone": "Phone already registered"}
