"""
Excel service for the schedule import template.
"""

import io
import logging

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.datavalidation import DataValidation

from pogoklink.utils.schedule_import import IMPORT_COLUMNS

logger = logging.getLogger(__name__)

TEMPLATE_SHEET_TITLE = "일정양식"
TEMPLATE_FILENAME = "PogoLink_Schedule_Template.xlsx"

# Rows pre-configured with dropdowns below the header
VALIDATION_ROWS = 500


class ScheduleExcelService:
    """Service for building the schedule import workbook."""

    def build_import_template(self) -> io.BytesIO:
        """Build an empty import workbook with the header row and dropdowns."""
        wb = Workbook()
        ws = wb.active
        ws.title = TEMPLATE_SHEET_TITLE

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="6B21A8", end_color="6B21A8", fill_type="solid")

        for col_idx, header in enumerate(IMPORT_COLUMNS, start=1):
            cell = ws.cell(row=1, column=col_idx, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center", vertical="center")
            ws.column_dimensions[get_column_letter(col_idx)].width = max(14, len(header) * 2)

        visibility_col = get_column_letter(len(IMPORT_COLUMNS))
        visibility_validation = DataValidation(
            type="list",
            formula1='"전체,교직원,부서"',
            allow_blank=True,
        )
        visibility_validation.add(f"{visibility_col}2:{visibility_col}{VALIDATION_ROWS + 1}")
        ws.add_data_validation(visibility_validation)
        ws.freeze_panes = "A2"

        output = io.BytesIO()
        wb.save(output)
        output.seek(0)

        logger.info("Import template generated", extra={"columns": len(IMPORT_COLUMNS)})
        return output
