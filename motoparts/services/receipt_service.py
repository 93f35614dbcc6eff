"""Invoice generation.

Builds a printable PDF invoice for one sale summary. The layout is
fixed-width text (Courier) so the same lines can be previewed on screen.

Example::

    from motoparts.services.receipt_service import ReceiptService

    pdf_bytes = ReceiptService.generate_invoice_pdf(
        sale=SaleService.get_summary(client, 42),
        shop={"name": "MotoParts", "address": "Main Bazaar", "phone": "0300-0000000"},
    )
"""
from __future__ import annotations

import io
from decimal import Decimal
from typing import Any, Dict, List

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from motoparts.constants import SHOP_ADDRESS, SHOP_NAME, SHOP_PHONE
from motoparts.utils.calculations import round_money, to_decimal
from motoparts.utils.formatting import format_currency, format_datetime


class ReceiptService:
    """Static helpers that turn a sale into invoice lines and a PDF.

    Attributes:
        DEFAULT_WIDTH: Characters per line
    """

    DEFAULT_WIDTH = 78

    @staticmethod
    def default_shop() -> Dict[str, str]:
        return {"name": SHOP_NAME, "address": SHOP_ADDRESS, "phone": SHOP_PHONE}

    @staticmethod
    def _wrap_lines(text: str, width: int) -> List[str]:
        """Word-wraps text, splitting words longer than the width."""
        if not text:
            return []
        width = max(int(width), 1)
        lines: List[str] = []
        for part in (p.strip() for p in text.splitlines()):
            if not part:
                continue
            current = ""
            for word in part.split():
                while len(word) > width:
                    if current:
                        lines.append(current)
                        current = ""
                    lines.append(word[:width])
                    word = word[width:]
                if not current:
                    current = word
                elif len(current) + 1 + len(word) <= width:
                    current = f"{current} {word}"
                else:
                    lines.append(current)
                    current = word
            if current:
                lines.append(current)
        return lines

    @staticmethod
    def _center(text: str, width: int) -> str:
        return text.center(width)

    @staticmethod
    def _line(width: int) -> str:
        return "-" * width

    @staticmethod
    def _row(left: str, right: str, width: int) -> str:
        spaces = width - len(left) - len(right)
        return left + " " * max(spaces, 1) + right

    @staticmethod
    def _item_line(name: str, quantity: str, unit_price: str, total: str, width: int) -> List[str]:
        """One invoice row; long product names wrap onto continuation lines."""
        numbers = f"{quantity:>5} {unit_price:>14} {total:>14}"
        name_width = max(width - len(numbers) - 1, 10)
        name_lines = ReceiptService._wrap_lines(name, name_width) or [""]
        lines = [f"{name_lines[0]:<{name_width}} {numbers}"]
        lines.extend(name_lines[1:])
        return lines

    @staticmethod
    def build_invoice_lines(
        sale: Dict[str, Any],
        shop: Dict[str, str] | None = None,
        width: int | None = None,
    ) -> List[str]:
        """
        Text lines of the invoice.

        Args:
            sale: Summary row from ``SaleService.summary_row``
            shop: Shop header (``name``, ``address``, ``phone``)
            width: Characters per line

        Returns:
            Lines ready to print in a monospaced font
        """
        shop = shop or ReceiptService.default_shop()
        width = width or ReceiptService.DEFAULT_WIDTH
        money = lambda value: format_currency(value, symbol="")

        lines: List[str] = [""]
        for name_line in ReceiptService._wrap_lines(shop.get("name", ""), width):
            lines.append(ReceiptService._center(name_line, width))
        for address_line in ReceiptService._wrap_lines(shop.get("address", ""), width):
            lines.append(ReceiptService._center(address_line, width))
        if shop.get("phone"):
            lines.append(ReceiptService._center(f"Tel: {shop['phone']}", width))
        lines.extend(
            [
                "",
                ReceiptService._line(width),
                ReceiptService._center("SALES INVOICE", width),
                ReceiptService._line(width),
                ReceiptService._row(
                    f"Invoice #: {sale.get('id', '')}",
                    f"Date: {format_datetime(sale.get('created_at'))}",
                    width,
                ),
                f"Customer: {sale.get('customer_name', '')}",
                f"Status: {sale.get('payment_status', '')}",
                ReceiptService._line(width),
                *ReceiptService._item_line("Item", "Qty", "Unit price", "Amount", width),
                ReceiptService._line(width),
            ]
        )

        for item in sale.get("items", []):
            quantity = int(item.get("quantity_sold", 0) or 0)
            total = to_decimal(item.get("total_price", 0))
            unit_price = item.get("unit_price")
            if unit_price is None:
                unit_price = total / quantity if quantity else Decimal("0")
            lines.extend(
                ReceiptService._item_line(
                    item.get("product_name", ""),
                    str(quantity),
                    money(round_money(unit_price)),
                    money(round_money(total)),
                    width,
                )
            )

        total = round_money(sale.get("total_amount", 0))
        paid = round_money(sale.get("paid_amount", 0))
        lines.extend(
            [
                ReceiptService._line(width),
                ReceiptService._row("Total items:", str(sale.get("quantity", 0)), width),
                ReceiptService._row("TOTAL:", format_currency(total), width),
                ReceiptService._row("Paid:", format_currency(paid), width),
                ReceiptService._row("Balance due:", format_currency(max(total - paid, Decimal("0"))), width),
                ReceiptService._line(width),
                "",
                ReceiptService._center("Thank you for your business!", width),
            ]
        )
        return lines

    @staticmethod
    def generate_invoice_pdf(sale: Dict[str, Any], shop: Dict[str, str] | None = None) -> bytes:
        """Renders the invoice lines onto A4 pages and returns the PDF bytes."""
        lines = ReceiptService.build_invoice_lines(sale, shop)

        buffer = io.BytesIO()
        page_width, page_height = A4
        left_margin = 15 * mm
        top_margin = 15 * mm
        bottom_margin = 15 * mm
        font_name = "Courier"
        font_size = 9
        line_height = font_size + 3

        canvas_obj = canvas.Canvas(buffer, pagesize=A4)
        canvas_obj.setTitle(f"Invoice {sale.get('id', '')}")
        canvas_obj.setFont(font_name, font_size)
        y = page_height - top_margin
        for line in lines:
            if y < bottom_margin:
                canvas_obj.showPage()
                canvas_obj.setFont(font_name, font_size)
                y = page_height - top_margin
            canvas_obj.drawString(left_margin, y, line)
            y -= line_height

        canvas_obj.showPage()
        canvas_obj.save()
        buffer.seek(0)
        return buffer.getvalue()
