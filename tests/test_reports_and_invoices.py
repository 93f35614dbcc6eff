import datetime
import io

import openpyxl

from motoparts.services.receipt_service import ReceiptService
from motoparts.services.report_service import ReportService
from motoparts.states.report_state import ReportState
from motoparts.states.sales_history_state import SalesHistoryState

PRODUCTS = [
    {"id": 1, "sku": "BP-1", "name": "Brake Pad", "brand_name": "Honda", "shelf_code": "A1",
     "compatible_models": "CD 70", "quantity_in_stock": 10, "purchase_price": 80.0,
     "selling_price": 100.0, "stock_level": "in_stock"},
    {"id": 2, "sku": "SP-2", "name": "Spark Plug", "brand_name": "NGK", "shelf_code": "N/A",
     "compatible_models": "", "quantity_in_stock": 3, "purchase_price": 150.0,
     "selling_price": 200.0, "stock_level": "low"},
    {"id": 3, "sku": "CK-3", "name": "Chain Kit", "brand_name": "Honda", "shelf_code": "B2",
     "compatible_models": "CG 125", "quantity_in_stock": 0, "purchase_price": 900.0,
     "selling_price": 1200.0, "stock_level": "out"},
]

SUMMARIES = [
    {"id": 10, "customer_name": "Ahmed", "quantity": 2, "total_amount": 500.0, "paid_amount": 500.0,
     "payment_status": "PAID", "created_at": "2024-05-01T10:00:00", "items": []},
    {"id": 11, "customer_name": "Bilal", "quantity": 1, "total_amount": 900.0, "paid_amount": 300.0,
     "payment_status": "PARTIAL", "created_at": "2024-05-02T11:30:00", "items": []},
]

SALE = {
    "id": 42,
    "customer_name": "Ahmed",
    "quantity": 3,
    "total_amount": 350.0,
    "paid_amount": 100.0,
    "payment_status": "PARTIAL",
    "created_at": "2024-05-03T09:15:00",
    "items": [
        {"product_name": "Brake Pad", "quantity_sold": 2, "unit_price": 100.0, "total_price": 200.0},
        {"product_name": "Spark Plug", "quantity_sold": 1, "unit_price": None, "total_price": 150.0},
    ],
}


def test_stock_breakdown_counts_levels():
    counts = ReportService.stock_breakdown(PRODUCTS)

    assert counts == {"in_stock": 1, "low": 1, "out": 1, "total": 3}


def test_inventory_value():
    assert ReportService.inventory_value(PRODUCTS) == {"cost": 1250.0, "retail": 1600.0}


def test_sales_breakdown():
    sales = ReportService.sales_breakdown(SUMMARIES)

    assert sales == {"count": 2, "revenue": 1400.0, "paid_count": 1, "outstanding": 600.0}


def test_workbook_has_three_sheets():
    data = ReportService.build_workbook(
        PRODUCTS, SUMMARIES, generated_at=datetime.datetime(2024, 5, 3, 12, 0)
    )

    workbook = openpyxl.load_workbook(io.BytesIO(data))
    assert workbook.sheetnames == ["Summary", "Stock", "Sales"]
    assert workbook["Summary"]["A1"].value == "Inventory & Sales Report - 2024-05-03 12:00"
    stock = workbook["Stock"]
    assert [cell.value for cell in stock[1]][:2] == ["SKU", "Product"]
    assert stock["I3"].value == "Low Stock"
    assert workbook["Sales"]["C3"].value == "Bilal"


def test_invoice_lines_show_totals_and_balance():
    lines = ReceiptService.build_invoice_lines(
        SALE, shop={"name": "MotoParts", "address": "", "phone": "0300"}, width=48
    )
    text = "\n".join(lines)

    assert "SALES INVOICE" in text
    assert "Invoice #: 42" in text
    assert "Customer: Ahmed" in text
    assert "Tel: 0300" in text
    assert "Rs. 250.00" in lines[-4]
    assert all(len(line) <= 48 for line in lines)
    assert any(line.startswith("Spark Plug") and "150.00" in line for line in lines)


def test_invoice_pdf():
    pdf = ReceiptService.generate_invoice_pdf(SALE)

    assert pdf.startswith(b"%PDF")


def test_download_invoice(downloads, toasts):
    state = SalesHistoryState()
    state.sale_detail = SALE

    result = state.download_invoice()

    assert result == ("download", "invoice_42.pdf")
    assert downloads[0]["data"].startswith(b"%PDF")


def test_download_invoice_without_sale(toasts):
    state = SalesHistoryState()
    state.sale_detail = {"id": 0}

    assert state.download_invoice() == ("toast", "No sale loaded.")


def test_report_export_requires_loaded_data(toasts):
    state = ReportState()
    state.report_loaded = False

    assert state.export_report() == ("toast", "Load the report before exporting.")


def test_report_load_and_export(fake_api, downloads, product_payload):
    fake_api.responses[("GET", "/api/v1/products")] = [product_payload(1, quantity=2)]
    fake_api.responses[("GET", "/api/v1/sales-summary")] = {
        "data": [{"id": 10, "customerName": "Ahmed", "totalAmountSummary": 500, "paymentStatus": "PAID"}]
    }
    state = ReportState()
    state.is_authenticated = True

    state.load_report()
    result = state.export_report()

    assert state.report_loaded is True
    assert state.report_products[0]["stock_level"] == "low"
    assert result == ("download", "sales_report.xlsx")
    workbook = openpyxl.load_workbook(io.BytesIO(downloads[0]["data"]))
    assert workbook["Sales"]["A2"].value == 10
