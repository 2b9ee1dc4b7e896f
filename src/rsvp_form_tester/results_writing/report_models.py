"""Results writing entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from rsvp_form_tester.testcase_ingestion.testcase_models import Expectation


class MatchStatus(str, Enum):
    """Rendered status of one test case."""

    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class CaseOutcome:
    """Classification of one driven test case."""

    line_number: int
    description: str
    expected: Expectation | None
    actual: Expectation
    forwarded: bool
    expected_text: str = ""

    @property
    def passed(self) -> bool:
        return self.actual is self.expected

    @property
    def expected_label(self) -> str:
        """Expected outcome as rendered, or the raw cell text when it was not recognized."""
        return self.expected.value if self.expected is not None else self.expected_text

    @property
    def status(self) -> MatchStatus:
        return MatchStatus.PASS if self.passed else MatchStatus.FAIL


@dataclass(frozen=True)
class RunSummary:
    """Counters and outcomes of one completed run."""

    outcomes: tuple[CaseOutcome, ...]
    dry_run: bool = False

    @staticmethod
    def from_outcomes(outcomes: Sequence[CaseOutcome], *, dry_run: bool = False) -> RunSummary:
        return RunSummary(outcomes=tuple(outcomes), dry_run=dry_run)

    @property
    def passed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def total(self) -> int:
        return len(self.outcomes)


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    site_url: str
    table_location: str
    dry_run: bool
