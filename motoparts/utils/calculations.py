"""
Calculation utilities for the sale cart.

All arithmetic is done with ``Decimal``. Each line's gross, discount and tax
are rounded half-up to two places, line totals are built from those rounded
parts and the cart aggregates are their sums. So ``total == subtotal -
discount + tax`` holds exactly, and the line totals add up to the cart total.

Cart lines are plain dicts (see ``motoparts.states.types.SaleCartItem``);
the helpers below never mutate their input and always return new lists.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

MONEY_QUANT = Decimal("0.01")
HUNDRED = Decimal("100")


def to_decimal(value: Decimal | str | int | float | None) -> Decimal:
    return Decimal(str(value or 0))


def round_money(value: Decimal | str | int | float | None) -> Decimal:
    return to_decimal(value).quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)


def clamp_rate(value: Decimal | str | int | float | None) -> Decimal:
    """Clamps a percentage (discount or tax) to the 0..100 range."""
    rate = to_decimal(value)
    if rate < 0:
        return Decimal("0")
    if rate > HUNDRED:
        return HUNDRED
    return rate


def _line_parts(item: Dict[str, Any]) -> tuple[Decimal, Decimal, Decimal]:
    """Returns the rounded (gross, discount, tax) amounts of one line."""
    gross = round_money(
        to_decimal(item.get("quantity", 0)) * to_decimal(item.get("unit_price", 0))
    )
    discount_rate = clamp_rate(item.get("discount", 0))
    tax_rate = clamp_rate(item.get("tax", 0))
    discount = round_money(gross * discount_rate / HUNDRED)
    tax = round_money((gross - discount) * tax_rate / HUNDRED)
    return gross, discount, tax


def calculate_line_total(
    quantity: Decimal | int | float,
    unit_price: Decimal | float | str,
    discount: Decimal | float | str = 0,
    tax: Decimal | float | str = 0,
) -> Decimal:
    """
    Calculate the total of a single cart line.

    ``unit_price * quantity * (1 - discount/100) * (1 + tax/100)``
    """
    gross, discount_amount, tax_amount = _line_parts(
        {
            "quantity": quantity,
            "unit_price": unit_price,
            "discount": discount,
            "tax": tax,
        }
    )
    return gross - discount_amount + tax_amount


def calculate_cart_totals(items: List[Dict[str, Any]]) -> Dict[str, Decimal]:
    """
    Aggregate subtotal, discount, tax and total over all cart lines.

    Args:
        items: Cart lines with quantity, unit_price, discount and tax keys

    Returns:
        Dict with ``subtotal``, ``discount``, ``tax``, ``total`` and
        ``quantity`` (units in the cart)
    """
    subtotal = Decimal("0")
    discount = Decimal("0")
    tax = Decimal("0")
    quantity = 0
    for item in items:
        gross, line_discount, line_tax = _line_parts(item)
        subtotal += gross
        discount += line_discount
        tax += line_tax
        quantity += int(item.get("quantity", 0) or 0)

    return {
        "subtotal": subtotal,
        "discount": discount,
        "tax": tax,
        "total": subtotal - discount + tax,
        "quantity": Decimal(quantity),
    }


def _with_total(item: Dict[str, Any]) -> Dict[str, Any]:
    updated = dict(item)
    updated["total"] = float(
        calculate_line_total(
            updated.get("quantity", 0),
            updated.get("unit_price", 0),
            updated.get("discount", 0),
            updated.get("tax", 0),
        )
    )
    return updated


def add_cart_line(items: List[Dict[str, Any]], new_item: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Add a line to the cart.

    When the product is already in the cart its quantity is increased by
    the new quantity and that line's total recomputed; otherwise the line
    is appended.
    """
    product_id = new_item.get("product_id")
    added_quantity = int(new_item.get("quantity", 0) or 0)
    result: List[Dict[str, Any]] = []
    merged = False
    for item in items:
        if not merged and item.get("product_id") == product_id:
            updated = dict(item)
            updated["quantity"] = int(item.get("quantity", 0) or 0) + added_quantity
            result.append(_with_total(updated))
            merged = True
        else:
            result.append(item)
    if not merged:
        result.append(_with_total(new_item))
    return result


def remove_cart_line(items: List[Dict[str, Any]], product_id: Any) -> List[Dict[str, Any]]:
    return [item for item in items if item.get("product_id") != product_id]


def set_cart_line_quantity(
    items: List[Dict[str, Any]], product_id: Any, quantity: int
) -> List[Dict[str, Any]]:
    """Set a line's quantity. Non-positive quantities leave the cart unchanged."""
    if quantity <= 0:
        return list(items)
    result = []
    for item in items:
        if item.get("product_id") == product_id:
            updated = dict(item)
            updated["quantity"] = int(quantity)
            result.append(_with_total(updated))
        else:
            result.append(item)
    return result


def set_cart_line_rate(
    items: List[Dict[str, Any]], product_id: Any, field: str, value: Any
) -> List[Dict[str, Any]]:
    """Set a line's ``discount`` or ``tax`` percentage, clamped to 0..100."""
    if field not in {"discount", "tax"}:
        return list(items)
    rate = float(clamp_rate(value))
    result = []
    for item in items:
        if item.get("product_id") == product_id:
            updated = dict(item)
            updated[field] = rate
            result.append(_with_total(updated))
        else:
            result.append(item)
    return result


def sum_amounts(rows: List[Dict[str, Any]], key: str) -> Decimal:
    """Sum a money column over a list of rows."""
    total = Decimal("0.00")
    for row in rows:
        total += to_decimal(row.get(key, 0))
    return round_money(total)
