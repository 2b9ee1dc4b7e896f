"""Playwright form page adapter tests."""

from __future__ import annotations

import asyncio

from rsvp_form_tester.configuration.runtime_settings import FormLayout
from rsvp_form_tester.form_driving.form_page import PlaywrightFormPage


class _RecordingPage:
    def __init__(self, result=None) -> None:
        self.calls: list[tuple[str, object]] = []
        self._result = result

    async def evaluate(self, script: str, arg=None):
        self.calls.append((script, arg))
        return self._result


def test_fill_text_assigns_value_by_configured_id() -> None:
    page = _RecordingPage()
    layout = FormLayout(text_field_ids={**FormLayout().text_field_ids, "name": "guest-name"})

    asyncio.run(PlaywrightFormPage(page, layout).fill_text("name", "Jane"))

    assert page.calls[0][1] == ["guest-name", "Jane"]
    assert ".value = value" in page.calls[0][0]


def test_set_choice_checks_only_the_selected_control() -> None:
    page = _RecordingPage()

    asyncio.run(PlaywrightFormPage(page, FormLayout()).set_choice("taxi", "yes"))

    assert [arg for _, arg in page.calls] == [["taxi-yes", True], ["taxi-no", False]]


def test_set_choice_without_option_unchecks_both_controls() -> None:
    page = _RecordingPage()

    asyncio.run(PlaywrightFormPage(page, FormLayout()).set_choice("attending", None))

    assert [arg for _, arg in page.calls] == [["attending-yes", False], ["attending-no", False]]


def test_change_notification_bubbles_from_the_chosen_control() -> None:
    page = _RecordingPage()

    asyncio.run(PlaywrightFormPage(page, FormLayout()).notify_choice_changed("attending", "no"))

    script, arg = page.calls[0]
    assert arg == "attending-no"
    assert "bubbles: true" in script


def test_reset_clears_visibility_success_and_error_styles() -> None:
    page = _RecordingPage()

    asyncio.run(PlaywrightFormPage(page, FormLayout()).reset())

    script, arg = page.calls[0]
    assert arg == ["rsvpForm", "successMessage", "visible"]
    assert "form.reset()" in script
    assert "borderColor = ''" in script


def test_request_submit_uses_native_trigger() -> None:
    page = _RecordingPage()

    asyncio.run(PlaywrightFormPage(page, FormLayout()).request_submit())

    script, arg = page.calls[0]
    assert arg == "rsvpForm"
    assert "requestSubmit()" in script


def test_missing_element_ids_checks_every_layout_id() -> None:
    page = _RecordingPage(result=["taxi-no"])

    missing = asyncio.run(PlaywrightFormPage(page, FormLayout()).missing_element_ids())

    assert missing == ["taxi-no"]
    assert list(page.calls[0][1]) == list(FormLayout().element_ids())
