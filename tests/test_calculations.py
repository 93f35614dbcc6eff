from decimal import Decimal

from motoparts.utils.calculations import (
    add_cart_line,
    calculate_cart_totals,
    calculate_line_total,
    clamp_rate,
    remove_cart_line,
    set_cart_line_quantity,
    set_cart_line_rate,
    sum_amounts,
)


def _line(product_id, quantity, unit_price, discount=0, tax=0):
    return {
        "product_id": product_id,
        "product_name": f"Part {product_id}",
        "quantity": quantity,
        "unit_price": unit_price,
        "discount": discount,
        "tax": tax,
        "total": 0,
    }


def test_line_total_applies_discount_before_tax():
    assert calculate_line_total(2, "100", 10, 5) == Decimal("189.00")


def test_cart_totals_for_discounted_taxed_line():
    totals = calculate_cart_totals([_line(1, 2, 100, 10, 5)])

    assert totals["subtotal"] == Decimal("200.00")
    assert totals["discount"] == Decimal("20.00")
    assert totals["tax"] == Decimal("9.00")
    assert totals["total"] == Decimal("189.00")
    assert totals["quantity"] == Decimal(2)


def test_cart_total_identity_holds_after_rounding():
    items = [
        _line(1, 3, "33.33", 7.5, 16),
        _line(2, 1, "0.05", 50, 17),
        _line(3, 7, "12.99", 0, 0),
    ]
    totals = calculate_cart_totals(items)

    assert totals["total"] == totals["subtotal"] - totals["discount"] + totals["tax"]


def test_rates_are_clamped_to_percentage_range():
    assert clamp_rate(-5) == Decimal("0")
    assert clamp_rate(150) == Decimal("100")
    assert clamp_rate("12.5") == Decimal("12.5")


def test_add_cart_line_merges_same_product():
    items = add_cart_line([], _line(1, 1, 50))
    items = add_cart_line(items, _line(1, 2, 50))

    assert len(items) == 1
    assert items[0]["quantity"] == 3
    assert items[0]["total"] == 150.0


def test_add_cart_line_does_not_mutate_input():
    original = [_line(1, 1, 50)]
    add_cart_line(original, _line(1, 1, 50))

    assert original[0]["quantity"] == 1


def test_set_quantity_ignores_non_positive_values():
    items = add_cart_line([], _line(1, 2, 10))

    assert set_cart_line_quantity(items, 1, 0) == items
    assert set_cart_line_quantity(items, 1, -3) == items
    assert set_cart_line_quantity(items, 1, 5)[0]["total"] == 50.0


def test_set_rate_recomputes_line_total():
    items = add_cart_line([], _line(1, 1, 100))
    items = set_cart_line_rate(items, 1, "discount", 25)

    assert items[0]["discount"] == 25.0
    assert items[0]["total"] == 75.0
    assert set_cart_line_rate(items, 1, "price", 1) == items


def test_remove_cart_line():
    items = add_cart_line(add_cart_line([], _line(1, 1, 10)), _line(2, 1, 20))

    assert [i["product_id"] for i in remove_cart_line(items, 1)] == [2]


def test_totals_invariant_over_cart_operations():
    items = []
    operations = [
        lambda c: add_cart_line(c, _line(1, 1, "19.99")),
        lambda c: add_cart_line(c, _line(2, 3, "4.35")),
        lambda c: set_cart_line_rate(c, 1, "discount", 12.5),
        lambda c: set_cart_line_rate(c, 2, "tax", 17),
        lambda c: set_cart_line_quantity(c, 2, 9),
        lambda c: add_cart_line(c, _line(1, 2, "19.99")),
        lambda c: remove_cart_line(c, 2),
    ]
    for operation in operations:
        items = operation(items)
        totals = calculate_cart_totals(items)
        assert totals["total"] == totals["subtotal"] - totals["discount"] + totals["tax"]
        assert totals["quantity"] == sum(i["quantity"] for i in items)


def test_sum_amounts_rounds_half_up():
    rows = [{"amount": "0.005"}, {"amount": 1}]

    assert sum_amounts(rows, "amount") == Decimal("1.01")


def test_line_totals_add_up_to_cart_total():
    items = [
        _line(1, 1, "125.00", 7.5),
        _line(2, 1, "125.00", 7.5),
        _line(3, 3, "33.33", 7.5, 16),
    ]
    line_totals = [calculate_line_total(i["quantity"], i["unit_price"], i["discount"], i["tax"]) for i in items]

    assert line_totals[0] == Decimal("115.62")
    assert sum(line_totals) == calculate_cart_totals(items)["total"]
