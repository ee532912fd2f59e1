from __future__ import annotations

import csv
import io

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..core.enums import Standing
from .service import REPORT_COLUMNS, ReportData

SHEET_TITLE = "Matriz_Final"

_COLUMN_WIDTHS = {
    "Nº": 5,
    "ESTUDIANTE": 32,
    "CLASES REGISTRADAS": 20,
    "TOTAL FALTAS": 14,
    "% INASISTENCIA": 16,
    "ESTADO": 26,
    "FECHAS DE FALTAS": 45,
}


def write_report_xlsx(data: ReportData) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    ws.append(REPORT_COLUMNS)
    for row in data.rows:
        ws.append([row[c] for c in REPORT_COLUMNS])

    header_fill = PatternFill("solid", start_color="D3D3D3")
    risk_fill = PatternFill("solid", start_color="F8CBAD")
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)

    for cell in ws[1]:
        cell.font = Font(bold=True)
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = border

    status_col = REPORT_COLUMNS.index("ESTADO") + 1
    for row in ws.iter_rows(min_row=2, max_row=ws.max_row, max_col=len(REPORT_COLUMNS)):
        at_risk = row[status_col - 1].value == Standing.AT_RISK.value
        for cell in row:
            cell.border = border
            if at_risk:
                cell.fill = risk_fill

    for idx, name in enumerate(REPORT_COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = _COLUMN_WIDTHS[name]

    out = io.BytesIO()
    wb.save(out)
    return out.getvalue()


def write_report_csv(data: ReportData) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_COLUMNS)
    writer.writeheader()
    for row in data.rows:
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")
