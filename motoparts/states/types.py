from typing import List, TypedDict


class SessionUser(TypedDict):
    username: str
    email: str
    roles: List[str]


class ProductRow(TypedDict):
    id: int
    name: str
    sku: str
    description: str
    brand_id: int
    brand_name: str
    shelf_code_id: int
    shelf_code: str
    compatible_models: str
    compatible_model_ids: List[int]
    quantity_in_stock: int
    purchase_price: float
    selling_price: float
    stock_level: str


class CatalogEntry(TypedDict):
    id: int
    name: str
    description: str


class SupplierRow(TypedDict):
    id: int
    name: str
    company_name: str
    phone: str
    email: str
    address: str


class SaleCartItem(TypedDict):
    product_id: int
    product_name: str
    sku: str
    shelf_code: str
    brand_name: str
    compatible_models: str
    quantity: int
    unit_price: float
    discount: float
    tax: float
    total: float
    stock: int


class SaleItemRow(TypedDict):
    id: int
    product_id: int
    product_name: str
    sku: str
    quantity_sold: int
    unit_price: float
    total_price: float
    profit: float
    created_at: str
    paid: bool


class SaleSummaryRow(TypedDict):
    id: int
    customer_name: str
    customer_phone: str
    quantity: int
    total_amount: float
    paid_amount: float
    payment_status: str
    created_at: str
    items: List[SaleItemRow]


class DebtorTransaction(TypedDict):
    sale_id: int
    date: str
    amount: float
    paid: float
    remaining: float


class DebtorLedger(TypedDict):
    id: str
    name: str
    phone: str
    total_credit: float
    transactions: List[DebtorTransaction]


class ExpenseRow(TypedDict):
    id: int
    description: str
    amount: float
    category: str
    date: str


class UserRow(TypedDict):
    id: int
    username: str
    email: str
    role: str
