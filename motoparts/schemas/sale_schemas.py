from __future__ import annotations

from pydantic import Field

from motoparts.constants import DEFAULT_CUSTOMER_NAME
from motoparts.enums import PaymentStatus

from .base import BaseSchema


class SaleLineDTO(BaseSchema):
    product_id: int = Field(alias="productId")
    quantity_sold: int = Field(alias="quantitySold", gt=0)
    total_amount: float = Field(alias="totalAmount", ge=0)


class SaleSummaryCreateDTO(BaseSchema):
    customer_name: str = Field(DEFAULT_CUSTOMER_NAME, alias="customerName")
    payment_status: PaymentStatus = Field(alias="paymentStatus")
    total_amount_summary: float = Field(alias="totalAmountSummary", ge=0)
    quantity_sold_summary: int = Field(alias="quantitySoldSummary", ge=0)
    sale_items: list[SaleLineDTO] = Field(alias="saleItems", min_length=1)


class SoldProductRefDTO(BaseSchema):
    id: int
    product_name: str = Field("", alias="productName")
    sku: str = ""


class SaleItemUpdateDTO(BaseSchema):
    id: int
    product: SoldProductRefDTO
    quantity_sold: int = Field(alias="quantitySold", gt=0)
    total_price: float = Field(alias="totalPrice", ge=0)


class DebtorProductDTO(BaseSchema):
    product_id: int = Field(alias="productId")
    quantity: int = Field(gt=0)
    discount: float = Field(0, ge=0, le=100)
    tax: float = Field(0, ge=0, le=100)


class DebtorProductsUpdateDTO(BaseSchema):
    products: list[DebtorProductDTO] = Field(min_length=1)


class PaymentStatusUpdateDTO(BaseSchema):
    payment_status: PaymentStatus = Field(alias="paymentStatus")
