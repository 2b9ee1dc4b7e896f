"""Results workbook writer service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .report_models import CaseOutcome, RunMetadata, RunSummary

RESULTS_SHEET_NAME = "Results"
RUN_INFO_SHEET_NAME = "RunInfo"
RESULT_COLUMNS: tuple[str, ...] = ("Line", "Description", "Expected", "Actual", "Match", "Sent")


def write_results_workbook(
    output_path: Path | str,
    summary: RunSummary,
    run_metadata: RunMetadata,
) -> Path:
    """Write a workbook with one row per test case and a RunInfo sheet."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = RESULTS_SHEET_NAME

    _write_header(sheet)
    for row_index, outcome in enumerate(summary.outcomes, start=2):
        _write_outcome_row(sheet, row_index, outcome)

    _write_run_info_sheet(workbook, summary, run_metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_header(sheet: Worksheet) -> None:
    for column_index, name in enumerate(RESULT_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 4"
        sheet.column_dimensions[get_column_letter(column_index)].width = (
            48 if name == "Description" else 12
        )
    sheet.freeze_panes = "A2"


def _write_outcome_row(sheet: Worksheet, row_index: int, outcome: CaseOutcome) -> None:
    values = (
        outcome.line_number,
        outcome.description,
        outcome.expected_label,
        outcome.actual.value,
        outcome.status.value,
        "yes" if outcome.forwarded else "no",
    )
    for column_index, value in enumerate(values, start=1):
        sheet.cell(row=row_index, column=column_index, value=value)
    sheet.cell(row=row_index, column=5).style = "Good" if outcome.passed else "Bad"


def _write_run_info_sheet(
    workbook: Workbook, summary: RunSummary, run_metadata: RunMetadata
) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = [
        ("run_start", run_metadata.run_start.isoformat()),
        ("site_url", run_metadata.site_url),
        ("table_location", run_metadata.table_location),
        ("dry_run", run_metadata.dry_run),
        ("total", summary.total),
        ("passed", summary.passed),
        ("failed", summary.failed),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
