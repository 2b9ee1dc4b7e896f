"""One validation session against an already opened form."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from rsvp_form_tester.configuration.runtime_settings import TimingSettings
from rsvp_form_tester.form_driving.case_driver import drive_testcase, pause
from rsvp_form_tester.form_driving.form_page import FormPage
from rsvp_form_tester.results_writing.console_reporter import ConsoleReporter
from rsvp_form_tester.results_writing.report_models import CaseOutcome, RunSummary
from rsvp_form_tester.submission_interception import (
    IterationContext,
    NetworkBoundary,
    SubmissionShim,
    installed_shim,
)
from rsvp_form_tester.testcase_ingestion import LoadError, TableSource, load_testcases
from rsvp_form_tester.testcase_ingestion.testcase_models import RsvpTestCase

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionCollaborators:
    """Boundaries a session talks to."""

    form_page: FormPage
    network: NetworkBoundary
    table_source: TableSource
    reporter: ConsoleReporter


async def run_validation_session(
    collaborators: SessionCollaborators,
    *,
    table_location: str,
    endpoint_marker: str,
    timing: TimingSettings,
    dry_run: bool = False,
) -> RunSummary | None:
    """Load the table, drive every test case and report.

    Returns None, after logging the load error, when the table cannot be
    loaded; no test case is attempted in that case.
    """
    try:
        testcases = await load_testcases(collaborators.table_source, table_location)
    except LoadError as exc:
        _LOGGER.error("%s", exc)
        return None

    context = IterationContext()
    shim = SubmissionShim(context, endpoint_marker)
    collaborators.reporter.run_started(len(testcases))
    try:
        async with installed_shim(collaborators.network, shim):
            outcomes = await _drive_all(
                collaborators,
                context,
                testcases,
                timing=timing,
                dry_run=dry_run,
            )
    finally:
        await collaborators.form_page.reset()

    summary = RunSummary.from_outcomes(outcomes, dry_run=dry_run)
    collaborators.reporter.run_finished(summary)
    return summary


async def _drive_all(
    collaborators: SessionCollaborators,
    context: IterationContext,
    testcases: Sequence[RsvpTestCase],
    *,
    timing: TimingSettings,
    dry_run: bool,
) -> list[CaseOutcome]:
    outcomes: list[CaseOutcome] = []
    for testcase in testcases:
        outcome = await drive_testcase(
            collaborators.form_page,
            context,
            testcase,
            timing=timing,
            allow_real_submissions=not dry_run,
        )
        outcomes.append(outcome)
        collaborators.reporter.case_finished(outcome)
        await pause(timing.between_tests_ms)
    return outcomes
