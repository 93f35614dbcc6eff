"""
Validation utilities for form inputs.

Form validators return a ``{field: message}`` dict; an empty dict means
the form is valid. The same shape is produced from backend 400 responses
(see ``motoparts.api.envelopes.extract_field_errors``) so pages render
both the same way.
"""
import re
from typing import Any, Dict

from motoparts.constants import PASSWORD_MIN_LENGTH
from motoparts.enums import PaymentStatus

PHONE_PATTERN = re.compile(r"^[0-9+\-\s()]+$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_positive_number(value: float | str) -> bool:
    """
    Validate if a number is positive.
    """
    try:
        return float(value) > 0
    except (ValueError, TypeError):
        return False


def validate_non_negative(value: float | str) -> bool:
    """
    Validate if a number is non-negative.
    """
    try:
        return float(value) >= 0
    except (ValueError, TypeError):
        return False


def validate_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email or ""))


def validate_phone(phone: str) -> bool:
    return bool(PHONE_PATTERN.match(phone or ""))


def validate_required(value: Any) -> bool:
    """
    Validate if a value is present (strings must not be blank).
    """
    if value is None:
        return False
    return bool(str(value).strip())


def validate_payment(status: str, amount: float, total: float) -> str:
    """
    Check the amount received against the payment status of a new sale.

    Returns:
        Error message, or "" when the payment is consistent
    """
    if status == PaymentStatus.PAID.value:
        if amount < total:
            return "Payment amount must cover the full total for a paid sale."
    elif status == PaymentStatus.PARTIAL.value:
        if amount <= 0 or amount >= total:
            return "Partial payment must be greater than 0 and less than the total."
    elif status == PaymentStatus.UNPAID.value:
        if amount != 0:
            return "Payment amount must be 0 for an unpaid sale."
    else:
        return "Select a payment status."
    return ""


def validate_supplier_form(form: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if len((form.get("name") or "").strip()) < 3:
        errors["name"] = "Contact name must be at least 3 characters."
    if len((form.get("company_name") or "").strip()) < 2:
        errors["company_name"] = "Company name must be at least 2 characters."
    phone = (form.get("phone") or "").strip()
    if not phone:
        errors["phone"] = "Phone number is required."
    elif not validate_phone(phone):
        errors["phone"] = "Phone may only contain digits, spaces, +, - and ()."
    email = (form.get("email") or "").strip()
    if email and not validate_email(email):
        errors["email"] = "Enter a valid e-mail address."
    return errors


def validate_expense_form(form: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not validate_required(form.get("description")):
        errors["description"] = "Description is required."
    if not validate_required(form.get("amount")):
        errors["amount"] = "Amount is required."
    elif not validate_positive_number(form.get("amount")):
        errors["amount"] = "Amount must be a positive number."
    if not validate_required(form.get("category")):
        errors["category"] = "Category is required."
    if not validate_required(form.get("date")):
        errors["date"] = "Date is required."
    return errors


def validate_product_form(form: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not validate_required(form.get("name")):
        errors["name"] = "Product name is required."
    if not validate_required(form.get("sku")):
        errors["sku"] = "SKU is required."
    if not validate_required(form.get("brand_id")):
        errors["brand_id"] = "Select a brand."
    if not validate_non_negative(form.get("quantity_in_stock")):
        errors["quantity_in_stock"] = "Stock must be 0 or more."
    elif float(form.get("quantity_in_stock")) != int(float(form.get("quantity_in_stock"))):
        errors["quantity_in_stock"] = "Stock must be a whole number."
    if not validate_positive_number(form.get("purchase_price")):
        errors["purchase_price"] = "Purchase price must be greater than 0."
    if not validate_positive_number(form.get("selling_price")):
        errors["selling_price"] = "Selling price must be greater than 0."
    return errors


def validate_credentials(email: str, password: str) -> str:
    if not validate_required(email) or not validate_required(password):
        return "Email and password are required."
    if not validate_email(email):
        return "Enter a valid e-mail address."
    return ""


def validate_signup_form(form: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if len((form.get("username") or "").strip()) < 3:
        errors["username"] = "Username must be at least 3 characters."
    if not validate_email(form.get("email") or ""):
        errors["email"] = "Enter a valid e-mail address."
    password = form.get("password") or ""
    if len(password) < PASSWORD_MIN_LENGTH:
        errors["password"] = f"Password must be at least {PASSWORD_MIN_LENGTH} characters."
    elif password != (form.get("confirm_password") or ""):
        errors["confirm_password"] = "Passwords do not match."
    return errors
