"""Shop expenses (admin only)."""
from __future__ import annotations

from typing import Any, Dict

from motoparts.api.client import ApiClient
from motoparts.api.envelopes import PageResult, parse_page, to_number
from motoparts.schemas.account_schemas import ExpenseDTO
from motoparts.utils.formatting import round_currency
from motoparts.utils.logger import get_logger

logger = get_logger("ExpenseService")

EXPENSES_PATH = "/api/v1/expenses"


class ExpenseService:
    @staticmethod
    def expense_row(raw: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": raw.get("id"),
            "description": str(raw.get("description") or ""),
            "amount": round_currency(raw.get("amount") or 0),
            "category": str(raw.get("category") or ""),
            "date": str(raw.get("date") or raw.get("createdAt") or "")[:10],
        }

    @staticmethod
    def list_expenses(
        client: ApiClient,
        page: int = 1,
        limit: int = 10,
        search: str = "",
        sort_by: str = "date",
        sort_order: str = "desc",
    ) -> PageResult:
        params = {
            "page": page,
            "limit": limit,
            "search": search,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        result = parse_page(client.get(EXPENSES_PATH, params=params), page=page, per_page=limit)
        result.items = [ExpenseService.expense_row(row) for row in result.items]
        return result

    @staticmethod
    def create_expense(client: ApiClient, dto: ExpenseDTO) -> None:
        client.post(EXPENSES_PATH, json=dto.to_payload())
        logger.info("Expense recorded: %s %s", dto.category, dto.amount)

    @staticmethod
    def update_expense(client: ApiClient, expense_id: int, dto: ExpenseDTO) -> None:
        client.put(f"{EXPENSES_PATH}/{expense_id}", json=dto.to_payload())
        logger.info("Expense %s updated", expense_id)

    @staticmethod
    def delete_expense(client: ApiClient, expense_id: int) -> None:
        client.delete(f"{EXPENSES_PATH}/{expense_id}")
        logger.info("Expense %s deleted", expense_id)

    @staticmethod
    def today_total(client: ApiClient) -> float:
        return round_currency(to_number(client.get(f"{EXPENSES_PATH}/today")))

    @staticmethod
    def monthly_total(client: ApiClient) -> float:
        return round_currency(to_number(client.get(f"{EXPENSES_PATH}/monthly")))
