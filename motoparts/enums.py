from enum import Enum


class PaymentStatus(str, Enum):
    paid = "PAID"
    unpaid = "UNPAID"
    partial = "PARTIAL"

    PAID = paid
    UNPAID = unpaid
    PARTIAL = partial


class Role(str, Enum):
    admin = "ROLE_ADMIN"
    user = "ROLE_USER"

    ADMIN = admin
    USER = user


class StockLevel(str, Enum):
    in_stock = "in_stock"
    low = "low"
    out = "out"

    IN_STOCK = in_stock
    LOW = low
    OUT = out


class CatalogKind(str, Enum):
    brands = "brands"
    shelf_codes = "shelf_codes"
    compatible_models = "compatible_models"

    BRANDS = brands
    SHELF_CODES = shelf_codes
    COMPATIBLE_MODELS = compatible_models
