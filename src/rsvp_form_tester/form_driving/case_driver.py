"""Per test case form driving service."""

from __future__ import annotations

import asyncio
import logging

from rsvp_form_tester.configuration.runtime_settings import TimingSettings
from rsvp_form_tester.results_writing.report_models import CaseOutcome
from rsvp_form_tester.submission_interception.interception_context import IterationContext
from rsvp_form_tester.testcase_ingestion.testcase_models import Expectation, RsvpTestCase

from .form_page import FormPage

_LOGGER = logging.getLogger(__name__)

LEADING_TEXT_FIELDS: tuple[str, ...] = ("name", "email")
CONDITIONAL_TEXT_FIELDS: tuple[str, ...] = (
    "guestnames",
    "dietary",
    "song",
    "advice",
    "funfact",
    "otherquestion",
)


def selected_option(value: str) -> str | None:
    """Map a table choice value to the control it selects, if any."""
    lowered = value.lower()
    if lowered in {"yes", "no"}:
        return lowered
    return None


def change_target(value: str) -> str:
    """Control that receives the change event for a non-empty choice value."""
    return "yes" if value.lower() == "yes" else "no"


def classify(submission_attempted: bool) -> Expectation:
    return Expectation.ACCEPT if submission_attempted else Expectation.REJECT


async def pause(milliseconds: int) -> None:
    await asyncio.sleep(milliseconds / 1000)


async def drive_testcase(
    form_page: FormPage,
    context: IterationContext,
    testcase: RsvpTestCase,
    *,
    timing: TimingSettings,
    allow_real_submissions: bool = True,
) -> CaseOutcome:
    """Reset, populate and submit the form for one test case, then classify it."""
    context.reset()
    await form_page.reset()

    for field in LEADING_TEXT_FIELDS:
        await form_page.fill_text(field, getattr(testcase, field))

    await form_page.set_choice("attending", selected_option(testcase.attending))
    if testcase.attending:
        await form_page.notify_choice_changed("attending", change_target(testcase.attending))

    # conditional fields render after the change event
    await pause(timing.settle_ms)

    for field in CONDITIONAL_TEXT_FIELDS:
        await form_page.fill_text(field, getattr(testcase, field))
    await form_page.set_choice("taxi", selected_option(testcase.taxi))

    context.arm(allow_real=allow_real_submissions and testcase.expect is Expectation.ACCEPT)
    await form_page.request_submit()

    await pause(timing.observe_ms)

    outcome = CaseOutcome(
        line_number=testcase.line_number,
        description=testcase.description,
        expected=testcase.expect,
        actual=classify(context.submission_attempted),
        forwarded=context.forwarded,
        expected_text=testcase.expect_text,
    )
    _LOGGER.debug(
        "Line %d classified %s (expected %s)",
        testcase.line_number,
        outcome.actual.value,
        outcome.expected_label,
    )
    return outcome
