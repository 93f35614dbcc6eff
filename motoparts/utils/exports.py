"""
Excel export utilities.

Thin helpers over openpyxl used by the report export.
"""
import io
from typing import Any

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="4F46E5", end_color="4F46E5", fill_type="solid")
HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center")
TITLE_FONT = Font(bold=True, size=14)
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)
MONEY_FORMAT = "#,##0.00"


def create_excel_workbook(title: str) -> tuple[Workbook, Worksheet]:
    """
    Create a workbook whose active sheet carries the given title.

    Sheet names are capped at Excel's 31 characters.
    """
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.title = title[:31]
    return workbook, sheet


def add_sheet(workbook: Workbook, title: str) -> Worksheet:
    return workbook.create_sheet(title=title[:31])


def add_title_row(ws: Worksheet, title: str, row: int = 1) -> int:
    """Writes a bold title and returns the next free row (one blank row left)."""
    cell = ws.cell(row=row, column=1, value=title)
    cell.font = TITLE_FONT
    return row + 2


def style_header_row(ws: Worksheet, row: int, columns: list[str]) -> None:
    """
    Add styled headers to a worksheet row.

    Args:
        ws: The worksheet to modify
        row: Row number (1-indexed)
        columns: Column header texts
    """
    for col_idx, header in enumerate(columns, start=1):
        cell = ws.cell(row=row, column=col_idx, value=header)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        cell.border = THIN_BORDER


def add_data_rows(
    ws: Worksheet,
    data: list[list[Any]],
    start_row: int,
    money_columns: set[int] | None = None,
) -> int:
    """
    Write rows of values starting at ``start_row``.

    Args:
        ws: The worksheet to modify
        data: Row values
        start_row: First row number (1-indexed)
        money_columns: 1-based column indexes formatted as money

    Returns:
        The row number after the last data row
    """
    money_columns = money_columns or set()
    current_row = start_row
    for row_data in data:
        for col_idx, value in enumerate(row_data, start=1):
            cell = ws.cell(row=current_row, column=col_idx, value=value)
            cell.border = THIN_BORDER
            if col_idx in money_columns:
                cell.number_format = MONEY_FORMAT
        current_row += 1
    return current_row


def auto_adjust_column_widths(ws: Worksheet, min_width: int = 10, max_width: int = 50) -> None:
    """Size each column to its longest value, within the given bounds."""
    for column in ws.columns:
        column_letter = column[0].column_letter
        max_length = max(
            (len(str(cell.value)) for cell in column if cell.value is not None),
            default=0,
        )
        ws.column_dimensions[column_letter].width = max(min_width, min(max_length + 2, max_width))


def workbook_to_bytes(workbook: Workbook) -> bytes:
    output = io.BytesIO()
    workbook.save(output)
    output.seek(0)
    return output.getvalue()
