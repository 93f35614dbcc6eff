import pytest

from motoparts.utils.validators import (
    validate_credentials,
    validate_expense_form,
    validate_payment,
    validate_product_form,
    validate_signup_form,
    validate_supplier_form,
)


@pytest.mark.parametrize(
    "status, amount, total, ok",
    [
        ("PAID", 189.0, 189.0, True),
        ("PAID", 200.0, 189.0, True),
        ("PAID", 100.0, 189.0, False),
        ("PARTIAL", 50.0, 189.0, True),
        ("PARTIAL", 0.0, 189.0, False),
        ("PARTIAL", 189.0, 189.0, False),
        ("UNPAID", 0.0, 189.0, True),
        ("UNPAID", 10.0, 189.0, False),
        ("CREDIT", 0.0, 189.0, False),
    ],
)
def test_validate_payment(status, amount, total, ok):
    assert (validate_payment(status, amount, total) == "") is ok


def test_product_form_errors():
    errors = validate_product_form(
        {
            "name": " ",
            "sku": "BP-1",
            "brand_id": "",
            "quantity_in_stock": "2.5",
            "purchase_price": "0",
            "selling_price": "120",
        }
    )

    assert set(errors) == {"name", "brand_id", "quantity_in_stock", "purchase_price"}
    assert errors["quantity_in_stock"] == "Stock must be a whole number."


def test_product_form_valid():
    form = {
        "name": "Chain Kit",
        "sku": "CK-70",
        "brand_id": "3",
        "quantity_in_stock": "0",
        "purchase_price": "900",
        "selling_price": "1200",
    }

    assert validate_product_form(form) == {}


def test_supplier_form_checks_phone_and_optional_email():
    errors = validate_supplier_form(
        {"name": "Al", "company_name": "AK Traders", "phone": "abc", "email": ""}
    )

    assert set(errors) == {"name", "phone"}


def test_expense_form_requires_positive_amount():
    errors = validate_expense_form(
        {"description": "Shop rent", "amount": "-5", "category": "Rent", "date": "2024-05-01"}
    )

    assert errors == {"amount": "Amount must be a positive number."}


def test_credentials():
    assert validate_credentials("", "secret") == "Email and password are required."
    assert validate_credentials("owner", "secret") == "Enter a valid e-mail address."
    assert validate_credentials("owner@shop.pk", "secret") == ""


def test_signup_password_confirmation():
    errors = validate_signup_form(
        {
            "username": "clerk",
            "email": "clerk@shop.pk",
            "password": "secret1",
            "confirm_password": "secret2",
        }
    )

    assert errors == {"confirm_password": "Passwords do not match."}
