"""Inventory and sales report: figures for the reports screen and the Excel export."""
from __future__ import annotations

import datetime
from typing import Any, Dict, List

from motoparts.enums import PaymentStatus, StockLevel
from motoparts.utils.calculations import sum_amounts
from motoparts.utils.exports import (
    add_data_rows,
    add_sheet,
    add_title_row,
    auto_adjust_column_widths,
    create_excel_workbook,
    style_header_row,
    workbook_to_bytes,
)
from motoparts.utils.formatting import format_datetime

STOCK_LABELS = {
    StockLevel.IN_STOCK.value: "In Stock",
    StockLevel.LOW.value: "Low Stock",
    StockLevel.OUT.value: "Out of Stock",
}


class ReportService:
    @staticmethod
    def stock_breakdown(products: List[Dict[str, Any]]) -> Dict[str, int]:
        counts = {level.value: 0 for level in StockLevel}
        for product in products:
            counts[product.get("stock_level", StockLevel.IN_STOCK.value)] += 1
        counts["total"] = len(products)
        return counts

    @staticmethod
    def inventory_value(products: List[Dict[str, Any]]) -> Dict[str, float]:
        """Stock valued at purchase and at selling price."""
        at_cost = [
            {"value": p["purchase_price"] * p["quantity_in_stock"]} for p in products
        ]
        at_price = [
            {"value": p["selling_price"] * p["quantity_in_stock"]} for p in products
        ]
        return {
            "cost": float(sum_amounts(at_cost, "value")),
            "retail": float(sum_amounts(at_price, "value")),
        }

    @staticmethod
    def sales_breakdown(summaries: List[Dict[str, Any]]) -> Dict[str, float]:
        paid = [s for s in summaries if s.get("payment_status") == PaymentStatus.PAID.value]
        outstanding = [
            {"value": max(s.get("total_amount", 0) - s.get("paid_amount", 0), 0)}
            for s in summaries
            if s.get("payment_status") != PaymentStatus.PAID.value
        ]
        return {
            "count": len(summaries),
            "revenue": float(sum_amounts(summaries, "total_amount")),
            "paid_count": len(paid),
            "outstanding": float(sum_amounts(outstanding, "value")),
        }

    @staticmethod
    def build_workbook(
        products: List[Dict[str, Any]],
        summaries: List[Dict[str, Any]],
        generated_at: datetime.datetime | None = None,
    ) -> bytes:
        """
        Excel report with three sheets: summary, stock and sales.

        Returns:
            The ``.xlsx`` file content
        """
        generated_at = generated_at or datetime.datetime.now()
        workbook, summary_sheet = create_excel_workbook("Summary")

        stock = ReportService.stock_breakdown(products)
        value = ReportService.inventory_value(products)
        sales = ReportService.sales_breakdown(summaries)
        row = add_title_row(
            summary_sheet, f"Inventory & Sales Report - {generated_at:%Y-%m-%d %H:%M}"
        )
        style_header_row(summary_sheet, row, ["Metric", "Value"])
        add_data_rows(
            summary_sheet,
            [
                ["Products", stock["total"]],
                ["In stock", stock[StockLevel.IN_STOCK.value]],
                ["Low stock", stock[StockLevel.LOW.value]],
                ["Out of stock", stock[StockLevel.OUT.value]],
                ["Stock value (cost)", value["cost"]],
                ["Stock value (retail)", value["retail"]],
                ["Sales", sales["count"]],
                ["Sales revenue", sales["revenue"]],
                ["Outstanding credit", sales["outstanding"]],
            ],
            row + 1,
        )
        auto_adjust_column_widths(summary_sheet)

        stock_sheet = add_sheet(workbook, "Stock")
        stock_headers = [
            "SKU", "Product", "Brand", "Shelf", "Compatible models",
            "Qty", "Purchase price", "Selling price", "Status",
        ]
        style_header_row(stock_sheet, 1, stock_headers)
        add_data_rows(
            stock_sheet,
            [
                [
                    p["sku"], p["name"], p["brand_name"], p["shelf_code"],
                    p["compatible_models"], p["quantity_in_stock"],
                    p["purchase_price"], p["selling_price"],
                    STOCK_LABELS.get(p["stock_level"], p["stock_level"]),
                ]
                for p in products
            ],
            2,
            money_columns={7, 8},
        )
        auto_adjust_column_widths(stock_sheet)

        sales_sheet = add_sheet(workbook, "Sales")
        style_header_row(
            sales_sheet, 1, ["Sale #", "Date", "Customer", "Items", "Total", "Status"]
        )
        add_data_rows(
            sales_sheet,
            [
                [
                    s["id"], format_datetime(s["created_at"]), s["customer_name"],
                    s["quantity"], s["total_amount"], s["payment_status"],
                ]
                for s in summaries
            ],
            2,
            money_columns={5},
        )
        auto_adjust_column_widths(sales_sheet)

        return workbook_to_bytes(workbook)
