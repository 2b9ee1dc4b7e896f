"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from rsvp_form_tester.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from rsvp_form_tester.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_form_validation_run,
)
from rsvp_form_tester.template_generation import generate_table_template


class CliError(Exception):
    """Custom CLI error."""


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="rsvp-form-tester")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable INFO logging.")
def cli(verbose: bool) -> None:
    """Client-side validation tester for the RSVP form."""
    setup_logging(verbose)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML test configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML test configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-template")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the CSV test table to write",
)
def generate_template(output_path: str) -> None:
    """Generate an empty CSV test table with every supported column."""
    try:
        resolved_output = generate_table_template(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON test configuration file",
)
@click.option(
    "--input",
    "input_path",
    required=False,
    type=click.Path(path_type=str),
    help="Local CSV test table; defaults to the configured location on the site",
)
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path of a results workbook to write",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Answer every submission locally instead of sending accepted ones.",
)
def run_tests(
    config_path: str, input_path: str | None, report_path: str | None, dry_run: bool
) -> None:
    """Drive the form through every test case of the test table."""
    try:
        outcome = execute_form_validation_run(
            RunRequest(
                config_path=config_path,
                input_path=input_path,
                report_path=report_path,
                dry_run=dry_run,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.summary is None:
        raise CliError("Test table could not be loaded; no tests were run.")
    if outcome.report_path is not None:
        click.echo(str(outcome.report_path))
    if not outcome.all_passed:
        raise CliError(
            f"{outcome.summary.failed} of {outcome.summary.total} validation tests failed."
        )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
