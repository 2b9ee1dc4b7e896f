"""Run execution use-case service."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from datetime import UTC, datetime

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright

from rsvp_form_tester.configuration import (
    Configuration,
    ConfigurationError,
    SiteSettings,
    load_configuration,
)
from rsvp_form_tester.form_driving.form_page import PlaywrightFormPage
from rsvp_form_tester.results_writing import (
    ConsoleReporter,
    RunMetadata,
    RunSummary,
    write_results_workbook,
)
from rsvp_form_tester.submission_interception import PlaywrightRouteBoundary
from rsvp_form_tester.testcase_ingestion import (
    LocalFileTableSource,
    PageRequestTableSource,
    TableSource,
)

from .run_contracts import RunOutcome, RunRequest
from .validation_session import SessionCollaborators, run_validation_session

_LOGGER = logging.getLogger(__name__)

PageOpener = Callable[[SiteSettings], AbstractAsyncContextManager[Page]]


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


@asynccontextmanager
async def open_site_page(site: SiteSettings) -> AsyncIterator[Page]:
    """Launch the configured browser and open the page under test."""
    async with async_playwright() as playwright:
        browser_type = getattr(playwright, site.browser)
        browser = await browser_type.launch(headless=site.headless)
        try:
            page = await browser.new_page()
            _LOGGER.info("Opening %s in %s", site.url, site.browser)
            await page.goto(site.url)
            yield page
        finally:
            await browser.close()


def execute_form_validation_run(
    request: RunRequest,
    *,
    page_opener: PageOpener | None = None,
) -> RunOutcome:
    """Execute one full form validation run and return the run outcome."""
    configuration = _load_run_configuration(request.config_path)
    resolved_page_opener = page_opener or open_site_page
    run_start = datetime.now(UTC)
    table_location = request.input_path or configuration.testcases.location

    try:
        summary = asyncio.run(
            _run_against_site(
                configuration,
                table_location=table_location,
                local_table=request.input_path is not None,
                dry_run=request.dry_run,
                page_opener=resolved_page_opener,
            )
        )
    except PlaywrightError as exc:
        raise RunExecutionError(f"Browser automation failed: {exc}") from exc

    report_path = None
    if summary is not None and request.report_path:
        report_path = write_results_workbook(
            request.report_path,
            summary,
            RunMetadata(
                run_start=run_start,
                site_url=configuration.site.url,
                table_location=table_location,
                dry_run=request.dry_run,
            ),
        )
    return RunOutcome(summary=summary, report_path=report_path, dry_run=request.dry_run)


def _load_run_configuration(config_path: str) -> Configuration:
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc


async def _run_against_site(
    configuration: Configuration,
    *,
    table_location: str,
    local_table: bool,
    dry_run: bool,
    page_opener: PageOpener,
) -> RunSummary | None:
    async with page_opener(configuration.site) as page:
        form_page = PlaywrightFormPage(page, configuration.form)
        missing = await form_page.missing_element_ids()
        if missing:
            raise RunExecutionError(
                f"Page {configuration.site.url} is missing form elements: {', '.join(missing)}"
            )
        table_source: TableSource
        if local_table:
            table_source = LocalFileTableSource()
        else:
            table_source = PageRequestTableSource(page.request, page.url)
        collaborators = SessionCollaborators(
            form_page=form_page,
            network=PlaywrightRouteBoundary(page),
            table_source=table_source,
            reporter=ConsoleReporter(),
        )
        return await run_validation_session(
            collaborators,
            table_location=table_location,
            endpoint_marker=configuration.submission.endpoint_marker,
            timing=configuration.timing,
            dry_run=dry_run,
        )
