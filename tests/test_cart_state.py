from motoparts.states.sale.cart_mixin import (
    add_product,
    cart_line_from_product,
    change_quantity,
    change_rate,
    totals_view,
)
from motoparts.states.sale_state import SaleState


def _product(product_id=1, name="Brake Pad", stock=3, price=100.0):
    return {
        "id": product_id,
        "name": name,
        "sku": f"SKU-{product_id}",
        "shelf_code": "A1",
        "brand_name": "Honda",
        "compatible_models": "CD 70",
        "quantity_in_stock": stock,
        "selling_price": price,
    }


def test_cart_line_starts_without_discount_or_tax():
    line = cart_line_from_product(_product(price=250))

    assert line["product_id"] == 1
    assert line["unit_price"] == 250.0
    assert line["discount"] == 0.0
    assert line["tax"] == 0.0
    assert line["stock"] == 3


def test_add_product_merges_same_product():
    items, error = add_product([], _product())
    items, error = add_product(items, _product())

    assert error == ""
    assert len(items) == 1
    assert items[0]["quantity"] == 2
    assert items[0]["total"] == 200.0


def test_add_product_refuses_more_than_stock():
    items, _ = add_product([], _product(stock=1))

    same, error = add_product(items, _product(stock=1))

    assert same == items
    assert error == "Only 1 units of Brake Pad in stock."


def test_add_product_out_of_stock():
    items, error = add_product([], _product(stock=0))

    assert items == []
    assert error == "Brake Pad is out of stock."


def test_change_quantity_checks_stock():
    items, _ = add_product([], _product(stock=3))

    updated, error = change_quantity(items, 1, "3")
    assert error == ""
    assert updated[0]["quantity"] == 3

    unchanged, error = change_quantity(items, 1, "4")
    assert unchanged == items
    assert "Only 3 units" in error


def test_change_quantity_ignores_invalid_values():
    items, _ = add_product([], _product())

    assert change_quantity(items, 1, "abc") == (items, "")
    assert change_quantity(items, 1, "0") == (items, "")
    assert change_quantity(items, 99, "2") == (items, "")


def test_totals_view_applies_discount_then_tax():
    items, _ = add_product([], _product(price=100))
    items, _ = change_quantity(items, 1, "2")
    items = change_rate(items, 1, "discount", "10")
    items = change_rate(items, 1, "tax", "5")

    totals = totals_view(items)

    assert totals["subtotal"] == 200.0
    assert totals["discount"] == 20.0
    assert totals["tax"] == 9.0
    assert totals["total"] == 189.0
    assert totals["quantity"] == 2.0


def test_sale_state_add_to_cart_clears_search(toasts):
    state = SaleState()
    state.cart_items = []
    state.product_query = "brake"
    state.product_suggestions = [_product()]

    state.add_to_cart(_product())

    assert len(state.cart_items) == 1
    assert state.product_query == ""
    assert state.product_suggestions == []
    assert toasts.calls == []


def test_sale_state_add_to_cart_over_stock_toasts(toasts):
    state = SaleState()
    state.cart_items = []
    state.add_to_cart(_product(stock=1))

    result = state.add_to_cart(_product(stock=1))

    assert result == ("toast", "Only 1 units of Brake Pad in stock.")
    assert state.cart_items[0]["quantity"] == 1


def test_sale_state_search_products(fake_api, product_payload):
    fake_api.responses[("GET", "/api/v1/products")] = [
        product_payload(1, "Brake Pad", quantity=2),
        product_payload(2, "Brake Shoe", quantity=0),
    ]
    state = SaleState()

    state.search_products("brake")

    assert state.product_query == "brake"
    assert [row["id"] for row in state.product_suggestions] == [1]


def test_sale_state_remove_and_clear():
    state = SaleState()
    state.cart_items = []
    state.add_to_cart(_product(1))
    state.add_to_cart(_product(2, "Chain"))

    state.remove_from_cart(1)
    assert [item["product_id"] for item in state.cart_items] == [2]

    state.clear_cart()
    assert state.cart_items == []
