"""Products: listing, search, CRUD and stock classification."""
from __future__ import annotations

from typing import Any, Dict, List

from motoparts.api.client import ApiClient
from motoparts.api.envelopes import PageResult, parse_page
from motoparts.constants import FULL_LIST_LIMIT, LOW_STOCK_THRESHOLD, PRODUCT_SUGGESTIONS_LIMIT
from motoparts.enums import StockLevel
from motoparts.schemas.inventory_schemas import ProductDTO
from motoparts.utils.formatting import round_currency
from motoparts.utils.logger import get_logger

logger = get_logger("ProductService")

PRODUCTS_PATH = "/api/v1/products"


def stock_level(quantity: int, threshold: int = LOW_STOCK_THRESHOLD) -> str:
    """``out`` at 0, ``low`` from 1 up to the threshold, else ``in_stock``."""
    quantity = int(quantity or 0)
    if quantity <= 0:
        return StockLevel.OUT.value
    if quantity <= threshold:
        return StockLevel.LOW.value
    return StockLevel.IN_STOCK.value


def _names(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    names = []
    for entry in value:
        if isinstance(entry, dict):
            entry = entry.get("name") or ""
        if entry:
            names.append(str(entry))
    return names


def _ids(value: Any) -> List[int]:
    if not isinstance(value, list):
        return []
    ids = []
    for entry in value:
        if isinstance(entry, dict):
            entry = entry.get("id")
        try:
            ids.append(int(entry))
        except (TypeError, ValueError):
            continue
    return ids


class ProductService:
    @staticmethod
    def product_row(raw: Dict[str, Any]) -> Dict[str, Any]:
        """Maps a backend product to the flat row used by tables and the cart."""
        quantity = int(raw.get("quantityInStock") or 0)
        models = _names(raw.get("compatibleModels"))
        model_ids = _ids(raw.get("compatibleModelIds") or raw.get("compatibleModelsIds"))
        if not model_ids:
            model_ids = _ids(raw.get("compatibleModels"))
        return {
            "id": raw.get("id"),
            "name": str(raw.get("name") or ""),
            "sku": str(raw.get("sku") or ""),
            "description": str(raw.get("description") or ""),
            "brand_id": raw.get("brandId"),
            "brand_name": str(raw.get("brandName") or ""),
            "shelf_code_id": raw.get("shelfCodeId"),
            "shelf_code": str(raw.get("shelfCodeName") or "N/A"),
            "compatible_models": ", ".join(models),
            "compatible_model_ids": model_ids,
            "quantity_in_stock": quantity,
            "purchase_price": round_currency(raw.get("purchasePrice") or 0),
            "selling_price": round_currency(raw.get("sellingPrice") or 0),
            "stock_level": stock_level(quantity),
        }

    @staticmethod
    def list_products(
        client: ApiClient, page: int = 1, limit: int = 10, name: str = ""
    ) -> PageResult:
        payload = client.get(PRODUCTS_PATH, params={"page": page, "limit": limit, "name": name})
        result = parse_page(payload, page=page, per_page=limit)
        result.items = [ProductService.product_row(row) for row in result.items]
        return result

    @staticmethod
    def list_all(client: ApiClient) -> List[Dict[str, Any]]:
        """Every product, for screens that filter or aggregate on the client."""
        return ProductService.list_products(client, page=1, limit=FULL_LIST_LIMIT).items

    @staticmethod
    def low_stock(client: ApiClient, threshold: int = LOW_STOCK_THRESHOLD) -> List[Dict[str, Any]]:
        rows = [
            row for row in ProductService.list_all(client)
            if row["quantity_in_stock"] <= threshold
        ]
        return sorted(rows, key=lambda row: (row["quantity_in_stock"], row["name"].lower()))

    @staticmethod
    def search_in_stock(
        client: ApiClient, term: str, limit: int = PRODUCT_SUGGESTIONS_LIMIT
    ) -> List[Dict[str, Any]]:
        """Name search limited to products that can still be sold."""
        if not term:
            return []
        rows = ProductService.list_products(client, page=1, limit=limit * 2, name=term).items
        return [row for row in rows if row["quantity_in_stock"] > 0][:limit]

    @staticmethod
    def create_product(client: ApiClient, dto: ProductDTO) -> None:
        client.post(PRODUCTS_PATH, json=dto.to_payload())
        logger.info("Product created: %s", dto.sku)

    @staticmethod
    def update_product(client: ApiClient, product_id: int, dto: ProductDTO) -> None:
        payload = dto.to_payload()
        payload["id"] = product_id
        client.put(f"{PRODUCTS_PATH}/{product_id}", json=payload)
        logger.info("Product %s updated", product_id)

    @staticmethod
    def delete_product(client: ApiClient, product_id: int) -> None:
        client.delete(f"{PRODUCTS_PATH}/{product_id}")
        logger.info("Product %s deleted", product_id)
