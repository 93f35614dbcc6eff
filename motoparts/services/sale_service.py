"""Sales: checkout, sale summaries, sale line records and debtor ledgers.

Endpoints:

- ``/api/v1/sales-summary``: one record per checkout (customer, totals,
  payment status, lines). Unpaid ones make up the khata.
- ``/api/v1/sales``: individual sale lines across all checkouts.
- ``/api/v1/today-sales``: the same lines restricted to today.
- ``/api/v1/sale-items/{productId}/payment``: settles one line of a debt.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List

from motoparts.api.client import ApiClient, ApiError
from motoparts.api.envelopes import PageResult, parse_page, unwrap
from motoparts.constants import DEFAULT_CUSTOMER_NAME
from motoparts.enums import PaymentStatus
from motoparts.schemas.sale_schemas import (
    DebtorProductDTO,
    DebtorProductsUpdateDTO,
    PaymentStatusUpdateDTO,
    SaleItemUpdateDTO,
    SaleLineDTO,
    SaleSummaryCreateDTO,
    SoldProductRefDTO,
)
from motoparts.utils.calculations import (
    calculate_cart_totals,
    calculate_line_total,
    round_money,
    to_decimal,
)
from motoparts.utils.formatting import round_currency
from motoparts.utils.logger import get_logger

logger = get_logger("SaleService")

SUMMARIES_PATH = "/api/v1/sales-summary"
SALE_ITEMS_PATH = "/api/v1/sales"
TODAY_ITEMS_PATH = "/api/v1/today-sales"


class SaleService:
    @staticmethod
    def build_sale(
        cart_items: List[Dict[str, Any]],
        customer_name: str,
        payment_status: str,
    ) -> SaleSummaryCreateDTO:
        """
        Builds the checkout body from the cart.

        Raises:
            ValueError: Empty cart or unknown payment status
        """
        if not cart_items:
            raise ValueError("No item selected")
        totals = calculate_cart_totals(cart_items)
        lines = [
            SaleLineDTO(
                product_id=int(item["product_id"]),
                quantity_sold=int(item["quantity"]),
                total_amount=float(
                    calculate_line_total(
                        item["quantity"],
                        item.get("unit_price", 0),
                        item.get("discount", 0),
                        item.get("tax", 0),
                    )
                ),
            )
            for item in cart_items
        ]
        return SaleSummaryCreateDTO(
            customer_name=(customer_name or "").strip() or DEFAULT_CUSTOMER_NAME,
            payment_status=PaymentStatus(payment_status),
            total_amount_summary=float(totals["total"]),
            quantity_sold_summary=int(totals["quantity"]),
            sale_items=lines,
        )

    @staticmethod
    def create_sale(client: ApiClient, dto: SaleSummaryCreateDTO) -> Any:
        result = client.post(SUMMARIES_PATH, json=dto.to_payload())
        logger.info(
            "Sale registered for %s: %s items, total %s, %s",
            dto.customer_name,
            dto.quantity_sold_summary,
            dto.total_amount_summary,
            dto.payment_status.value,
        )
        return result

    @staticmethod
    def item_row(raw: Dict[str, Any]) -> Dict[str, Any]:
        product = raw.get("product") if isinstance(raw.get("product"), dict) else {}
        quantity = int(raw.get("quantitySold") or 0)
        total = to_decimal(raw.get("totalPrice") or raw.get("totalAmount") or 0)
        unit_price = raw.get("unitPrice")
        if unit_price is None:
            unit_price = total / quantity if quantity else Decimal("0")
        return {
            "id": raw.get("id"),
            "product_id": raw.get("productId") or product.get("id"),
            "product_name": str(raw.get("productName") or product.get("productName") or product.get("name") or ""),
            "sku": str(raw.get("sku") or product.get("sku") or ""),
            "quantity_sold": quantity,
            "unit_price": float(round_money(unit_price)),
            "total_price": float(round_money(total)),
            "profit": round_currency(raw.get("profit") or 0),
            "created_at": str(raw.get("createdAt") or ""),
            "paid": bool(raw.get("paid") or str(raw.get("paymentStatus") or "").upper() == "PAID"),
        }

    @staticmethod
    def summary_row(raw: Dict[str, Any]) -> Dict[str, Any]:
        items = raw.get("saleItems") if isinstance(raw.get("saleItems"), list) else []
        status = str(raw.get("paymentStatus") or PaymentStatus.UNPAID.value).upper()
        total = round_currency(raw.get("totalAmountSummary") or 0)
        paid = raw.get("paidAmount", raw.get("amountPaid"))
        if paid is None:
            paid = total if status == PaymentStatus.PAID.value else 0
        return {
            "id": raw.get("id"),
            "customer_name": str(raw.get("customerName") or DEFAULT_CUSTOMER_NAME),
            "customer_phone": str(raw.get("customerPhone") or raw.get("phone") or ""),
            "quantity": int(raw.get("quantitySoldSummary") or 0),
            "total_amount": total,
            "paid_amount": round_currency(paid),
            "payment_status": status,
            "created_at": str(raw.get("createdAt") or ""),
            "items": [SaleService.item_row(item) for item in items if isinstance(item, dict)],
        }

    @staticmethod
    def list_summaries(
        client: ApiClient,
        page: int = 1,
        limit: int = 10,
        sort_by: str = "createdAt",
        sort_direction: str = "desc",
        status: str = "",
    ) -> PageResult:
        params = {
            "page": page,
            "limit": limit,
            "sortBy": sort_by,
            "sortDirection": sort_direction,
            "status": status,
        }
        result = parse_page(client.get(SUMMARIES_PATH, params=params), page=page, per_page=limit)
        result.items = [SaleService.summary_row(row) for row in result.items]
        return result

    @staticmethod
    def get_summary(client: ApiClient, summary_id: int) -> Dict[str, Any]:
        payload = unwrap(client.get(f"{SUMMARIES_PATH}/{summary_id}"))
        if not isinstance(payload, dict):
            raise ApiError("Sale not found.")
        return SaleService.summary_row(payload)

    @staticmethod
    def _list_items(client: ApiClient, path: str, page: int, limit: int) -> PageResult:
        result = parse_page(client.get(path, params={"page": page, "limit": limit}), page=page, per_page=limit)
        result.items = [SaleService.item_row(row) for row in result.items]
        return result

    @staticmethod
    def list_sale_items(client: ApiClient, page: int = 1, limit: int = 10) -> PageResult:
        return SaleService._list_items(client, SALE_ITEMS_PATH, page, limit)

    @staticmethod
    def list_today_items(client: ApiClient, page: int = 1, limit: int = 10) -> PageResult:
        return SaleService._list_items(client, TODAY_ITEMS_PATH, page, limit)

    @staticmethod
    def update_sale_item(client: ApiClient, item: Dict[str, Any], quantity: int) -> None:
        """Changes the quantity of a sale line; its total follows the unit price."""
        total = round_money(to_decimal(item.get("unit_price", 0)) * quantity)
        dto = SaleItemUpdateDTO(
            id=int(item["id"]),
            product=SoldProductRefDTO(
                id=int(item.get("product_id") or 0),
                product_name=item.get("product_name", ""),
                sku=item.get("sku", ""),
            ),
            quantity_sold=quantity,
            total_price=float(total),
        )
        client.put(f"{SALE_ITEMS_PATH}/{dto.id}", json=dto.to_payload())
        logger.info("Sale item %s set to %s units", dto.id, quantity)

    @staticmethod
    def delete_sale_item(client: ApiClient, item_id: int) -> None:
        client.delete(f"{SALE_ITEMS_PATH}/{item_id}")
        logger.info("Sale item %s deleted", item_id)

    @staticmethod
    def mark_summary_paid(client: ApiClient, summary_id: int) -> None:
        dto = PaymentStatusUpdateDTO(payment_status=PaymentStatus.PAID)
        client.patch(f"{SUMMARIES_PATH}/{summary_id}", json=dto.to_payload())
        logger.info("Sale %s marked as paid", summary_id)

    @staticmethod
    def pay_sale_item(client: ApiClient, product_id: int) -> None:
        client.patch(f"/api/v1/sale-items/{product_id}/payment", json={"productId": product_id})
        logger.info("Sale line for product %s marked as paid", product_id)

    @staticmethod
    def add_products_to_summary(
        client: ApiClient, summary_id: int, cart_items: List[Dict[str, Any]]
    ) -> None:
        dto = DebtorProductsUpdateDTO(
            products=[
                DebtorProductDTO(
                    product_id=int(item["product_id"]),
                    quantity=int(item["quantity"]),
                    discount=float(item.get("discount", 0)),
                    tax=float(item.get("tax", 0)),
                )
                for item in cart_items
            ]
        )
        client.put(f"{SUMMARIES_PATH}/{summary_id}", json=dto.to_payload())
        logger.info("%s products added to sale %s", len(dto.products), summary_id)

    @staticmethod
    def build_ledgers(summaries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Groups unpaid and partially paid sales into one ledger per customer.

        Each transaction carries ``amount``, ``paid`` and ``remaining``;
        ``total_credit`` is the sum of the remainders. Ledgers are ordered
        by outstanding balance, largest first.
        """
        ledgers: Dict[str, Dict[str, Any]] = {}
        for summary in summaries:
            if summary.get("payment_status") == PaymentStatus.PAID.value:
                continue
            amount = round_money(summary.get("total_amount", 0))
            paid = min(round_money(summary.get("paid_amount", 0)), amount)
            remaining = amount - paid
            if remaining <= 0:
                continue
            name = summary.get("customer_name") or DEFAULT_CUSTOMER_NAME
            key = name.strip().lower()
            ledger = ledgers.setdefault(
                key,
                {
                    "id": key,
                    "name": name,
                    "phone": summary.get("customer_phone", ""),
                    "total_credit": Decimal("0"),
                    "transactions": [],
                },
            )
            if not ledger["phone"] and summary.get("customer_phone"):
                ledger["phone"] = summary["customer_phone"]
            ledger["transactions"].append(
                {
                    "sale_id": summary.get("id"),
                    "date": summary.get("created_at", ""),
                    "amount": float(amount),
                    "paid": float(paid),
                    "remaining": float(remaining),
                }
            )
            ledger["total_credit"] += remaining

        result = []
        for ledger in ledgers.values():
            ledger["total_credit"] = float(ledger["total_credit"])
            result.append(ledger)
        return sorted(result, key=lambda ledger: (-ledger["total_credit"], ledger["name"].lower()))
