"""Headline figures for the dashboard."""
from __future__ import annotations

from typing import Dict

from motoparts.api.client import ApiClient, ApiError
from motoparts.api.envelopes import to_number
from motoparts.utils.formatting import round_currency
from motoparts.utils.logger import get_logger

from .expense_service import ExpenseService

logger = get_logger("DashboardService")


class DashboardService:
    @staticmethod
    def load_stats(client: ApiClient, include_expenses: bool = True) -> Dict[str, float]:
        """
        Today's sales, this month's revenue and (for admins) expenses.

        A figure whose endpoint fails is reported as 0 and logged; the
        error is raised only when every figure failed.
        """
        loaders = {
            "today_sales": lambda: to_number(client.get("/api/v1/today-sale/totalSale")),
            "monthly_revenue": lambda: to_number(client.get("/api/v1/sales/monthly-revenue")),
        }
        if include_expenses:
            loaders["today_expenses"] = lambda: ExpenseService.today_total(client)
            loaders["monthly_expenses"] = lambda: ExpenseService.monthly_total(client)

        stats: Dict[str, float] = {
            "today_sales": 0.0,
            "monthly_revenue": 0.0,
            "today_expenses": 0.0,
            "monthly_expenses": 0.0,
        }
        last_error: ApiError | None = None
        failures = 0
        for key, loader in loaders.items():
            try:
                stats[key] = round_currency(loader())
            except ApiError as exc:
                logger.warning("Dashboard figure %s unavailable: %s", key, exc.message)
                last_error = exc
                failures += 1
        if last_error is not None and failures == len(loaders):
            raise last_error
        stats["monthly_net"] = round_currency(stats["monthly_revenue"] - stats["monthly_expenses"])
        return stats
