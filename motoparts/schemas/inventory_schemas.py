from __future__ import annotations

from pydantic import Field

from .base import BaseSchema


class ProductDTO(BaseSchema):
    name: str = Field(min_length=1)
    brand_id: int = Field(alias="brandId")
    compatible_model_ids: list[int] = Field(default_factory=list, alias="compatibleModelIds")
    sku: str = Field(min_length=1)
    description: str = ""
    quantity_in_stock: int = Field(0, alias="quantityInStock", ge=0)
    purchase_price: float = Field(alias="purchasePrice", gt=0)
    selling_price: float = Field(alias="sellingPrice", gt=0)
    shelf_code_id: int | None = Field(None, alias="shelfCodeId")


class BrandDTO(BaseSchema):
    name: str = Field(min_length=1)
    description: str = ""


class CompatibleModelDTO(BaseSchema):
    name: str = Field(min_length=1)


class SupplierDTO(BaseSchema):
    name: str = Field(alias="contactPerson", min_length=3)
    company_name: str = Field(alias="company", min_length=2)
    phone: str = Field(alias="phoneNumber", min_length=1)
    email: str = ""
    address: str = ""
