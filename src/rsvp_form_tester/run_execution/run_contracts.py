"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rsvp_form_tester.results_writing.report_models import RunSummary


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    config_path: str
    input_path: str | None = None
    report_path: str | None = None
    dry_run: bool = False


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run.

    `summary` is None when the test table could not be loaded and no test ran.
    """

    summary: RunSummary | None
    report_path: Path | None
    dry_run: bool

    @property
    def loaded(self) -> bool:
        return self.summary is not None

    @property
    def all_passed(self) -> bool:
        return self.summary is not None and self.summary.failed == 0
