"""Console rendering of run results."""

from __future__ import annotations

import click

from .report_models import CaseOutcome, RunSummary


class ConsoleReporter:
    """Writes one line per test case and a closing summary."""

    def __init__(self, *, endpoint_label: str = "submission endpoint") -> None:
        self._endpoint_label = endpoint_label

    def run_started(self, total: int) -> None:
        click.echo(click.style(f"Running {total} client-side validation tests...", bold=True))
        click.echo()

    def case_finished(self, outcome: CaseOutcome) -> None:
        if outcome.passed:
            sent = f" (sent to {self._endpoint_label})" if outcome.forwarded else ""
            label = click.style("  PASS ", fg="green", bold=True)
            click.echo(f"{label} {outcome.description}: {outcome.actual.value}{sent}")
            return
        label = click.style("  FAIL ", fg="red", bold=True)
        click.echo(
            f"{label} {outcome.description}: got {outcome.actual.value}, "
            f"expected {outcome.expected_label}"
        )

    def run_finished(self, summary: RunSummary) -> None:
        color = "red" if summary.failed else "green"
        click.echo()
        click.echo(
            click.style(
                f"Results: {summary.passed} passed, {summary.failed} failed "
                f"out of {summary.total} tests",
                fg=color,
                bold=True,
            )
        )
        if summary.failed:
            return
        if summary.dry_run:
            note = f"Dry run: no submissions were sent to the {self._endpoint_label}."
        else:
            note = f"Valid submissions have been sent to the {self._endpoint_label}."
        click.echo(click.style(note, dim=True, italic=True))
