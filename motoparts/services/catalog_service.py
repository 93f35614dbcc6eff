"""Reference data: brands, shelf codes, compatible models and suppliers.

Brands, shelf codes and compatible models share one shape
(``{id, name, description}`` on this side), so they go through the same
CRUD methods keyed by ``CatalogKind``. The backend differs per resource in
the body it accepts, which ``_create_body``/``_update_body`` account for.
"""
from __future__ import annotations

from typing import Any, Dict, List

from motoparts.api.client import ApiClient
from motoparts.api.envelopes import PageResult, parse_page
from motoparts.constants import FULL_LIST_LIMIT
from motoparts.enums import CatalogKind
from motoparts.schemas.inventory_schemas import BrandDTO, CompatibleModelDTO, SupplierDTO
from motoparts.utils.logger import get_logger

logger = get_logger("CatalogService")

CATALOG_PATHS: Dict[str, str] = {
    CatalogKind.BRANDS.value: "/api/v1/brands",
    CatalogKind.SHELF_CODES.value: "/api/v1/shelf",
    CatalogKind.COMPATIBLE_MODELS.value: "/api/v1/compatible-models",
}

CATALOG_LABELS: Dict[str, str] = {
    CatalogKind.BRANDS.value: "Brand",
    CatalogKind.SHELF_CODES.value: "Shelf code",
    CatalogKind.COMPATIBLE_MODELS.value: "Compatible model",
}

SUPPLIERS_PATH = "/api/v1/suppliers"


def _path(kind: str) -> str:
    try:
        return CATALOG_PATHS[kind]
    except KeyError:
        raise ValueError(f"Unknown catalog kind: {kind}") from None


class CatalogService:
    @staticmethod
    def catalog_row(raw: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": raw.get("id"),
            "name": str(raw.get("name") or raw.get("code") or ""),
            "description": str(raw.get("description") or ""),
        }

    @staticmethod
    def list_entries(client: ApiClient, kind: str) -> List[Dict[str, Any]]:
        page = parse_page(client.get(_path(kind)), per_page=FULL_LIST_LIMIT)
        rows = [CatalogService.catalog_row(row) for row in page.items]
        return sorted(rows, key=lambda row: row["name"].lower())

    @staticmethod
    def _create_body(kind: str, name: str, description: str) -> Dict[str, Any]:
        if kind == CatalogKind.BRANDS.value:
            return BrandDTO(name=name, description=description).to_payload()
        if kind == CatalogKind.SHELF_CODES.value:
            return {"name": name}
        return CompatibleModelDTO(name=name).to_payload()

    @staticmethod
    def _update_body(kind: str, entry_id: int, name: str, description: str) -> Dict[str, Any]:
        if kind == CatalogKind.BRANDS.value:
            body = BrandDTO(name=name, description=description).to_payload()
            body["id"] = entry_id
            return body
        if kind == CatalogKind.SHELF_CODES.value:
            return {"code": name}
        return CompatibleModelDTO(name=name).to_payload()

    @staticmethod
    def create_entry(client: ApiClient, kind: str, name: str, description: str = "") -> None:
        client.post(_path(kind), json=CatalogService._create_body(kind, name, description))
        logger.info("%s created: %s", CATALOG_LABELS[kind], name)

    @staticmethod
    def update_entry(
        client: ApiClient, kind: str, entry_id: int, name: str, description: str = ""
    ) -> None:
        client.put(
            f"{_path(kind)}/{entry_id}",
            json=CatalogService._update_body(kind, entry_id, name, description),
        )
        logger.info("%s %s updated", CATALOG_LABELS[kind], entry_id)

    @staticmethod
    def delete_entry(client: ApiClient, kind: str, entry_id: int) -> None:
        client.delete(f"{_path(kind)}/{entry_id}")
        logger.info("%s %s deleted", CATALOG_LABELS[kind], entry_id)

    @staticmethod
    def supplier_row(raw: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": raw.get("id"),
            "name": str(raw.get("contactPerson") or raw.get("name") or ""),
            "company_name": str(raw.get("company") or raw.get("companyName") or ""),
            "phone": str(raw.get("phoneNumber") or raw.get("phone") or ""),
            "email": str(raw.get("email") or ""),
            "address": str(raw.get("address") or ""),
        }

    @staticmethod
    def list_suppliers(
        client: ApiClient, page: int = 1, limit: int = 10, search: str = ""
    ) -> PageResult:
        payload = client.get(SUPPLIERS_PATH, params={"page": page, "limit": limit, "search": search})
        result = parse_page(payload, page=page, per_page=limit)
        result.items = [CatalogService.supplier_row(row) for row in result.items]
        return result

    @staticmethod
    def save_supplier(client: ApiClient, dto: SupplierDTO, supplier_id: int | None = None) -> None:
        if supplier_id:
            client.put(f"{SUPPLIERS_PATH}/{supplier_id}", json=dto.to_payload())
            logger.info("Supplier %s updated", supplier_id)
        else:
            client.post(SUPPLIERS_PATH, json=dto.to_payload())
            logger.info("Supplier created: %s", dto.company_name)

    @staticmethod
    def delete_supplier(client: ApiClient, supplier_id: int) -> None:
        client.delete(f"{SUPPLIERS_PATH}/{supplier_id}")
        logger.info("Supplier %s deleted", supplier_id)
