"""Results writing domain exports."""

from .console_reporter import ConsoleReporter
from .report_models import CaseOutcome, MatchStatus, RunMetadata, RunSummary
from .run_report_writer import write_results_workbook

__all__ = [
    "CaseOutcome",
    "ConsoleReporter",
    "MatchStatus",
    "RunMetadata",
    "RunSummary",
    "write_results_workbook",
]
