"""
Reports screen: stock and sales figures plus the Excel export.

The figures are computed on the client from the full product list and the
sale summaries, so the screen and the workbook always agree.
"""
import reflex as rx
from typing import Any, Dict, List

from motoparts.api.client import ApiError
from motoparts.constants import FULL_LIST_LIMIT
from motoparts.enums import StockLevel
from motoparts.services.product_service import ProductService
from motoparts.services.report_service import STOCK_LABELS, ReportService
from motoparts.services.sale_service import SaleService
from motoparts.utils.logger import get_logger
from .mixin_state import MixinState, require_login
from .types import ProductRow, SaleSummaryRow

logger = get_logger("ReportState")

STOCK_COLORS = {
    StockLevel.IN_STOCK.value: "#10b981",
    StockLevel.LOW.value: "#f59e0b",
    StockLevel.OUT.value: "#ef4444",
}


class ReportState(MixinState):
    report_products: List[ProductRow] = []
    report_summaries: List[SaleSummaryRow] = []
    report_error: str = ""
    report_loaded: bool = False

    @rx.var
    def stock_chart_data(self) -> List[Dict[str, Any]]:
        counts = ReportService.stock_breakdown(self.report_products)
        return [
            {"name": STOCK_LABELS[level.value], "value": counts[level.value], "fill": STOCK_COLORS[level.value]}
            for level in StockLevel
        ]

    @rx.var
    def report_figures(self) -> Dict[str, float]:
        stock = ReportService.stock_breakdown(self.report_products)
        value = ReportService.inventory_value(self.report_products)
        sales = ReportService.sales_breakdown(self.report_summaries)
        return {
            "products": stock["total"],
            "low_stock": stock[StockLevel.LOW.value],
            "out_of_stock": stock[StockLevel.OUT.value],
            "stock_cost": value["cost"],
            "stock_retail": value["retail"],
            "sales_count": sales["count"],
            "sales_revenue": sales["revenue"],
            "outstanding": sales["outstanding"],
        }

    @rx.event
    @require_login
    def load_report(self):
        self.report_error = ""
        client = self._api()
        try:
            self.report_products = ProductService.list_all(client)
            self.report_summaries = SaleService.list_summaries(
                client, page=1, limit=FULL_LIST_LIMIT
            ).items
        except ApiError as exc:
            self.report_loaded = False
            return self._api_failure(exc, "report", "Loading report")
        self.report_loaded = True

    @rx.event
    def export_report(self):
        if not self.report_loaded:
            return rx.toast("Load the report before exporting.", duration=3000)
        data = ReportService.build_workbook(self.report_products, self.report_summaries)
        logger.info(
            "Report exported: %s products, %s sales",
            len(self.report_products),
            len(self.report_summaries),
        )
        return rx.download(data=data, filename="sales_report.xlsx")
