"""Shared fakes for the form under test and its network boundary."""

from __future__ import annotations

import pytest
from rsvp_form_tester.configuration.runtime_settings import (
    CHOICE_GROUPS,
    CHOICE_OPTIONS,
    TEXT_FIELDS,
    TimingSettings,
)
from rsvp_form_tester.submission_interception import InterceptDecision, SubmissionShim
from rsvp_form_tester.testcase_ingestion import LoadError

SUBMISSION_URL = "https://docs.example.com/forms/d/e/abc/formResponse"
ANALYTICS_URL = "https://analytics.example.com/collect"


class FakeNetwork:
    """Network boundary whose active fetch function is swapped by install/restore."""

    def __init__(self) -> None:
        self.real_calls: list[str] = []
        self.short_circuited: list[str] = []
        self.fetch = self._real_fetch
        self._saved_fetch = None

    async def _real_fetch(self, url: str) -> int:
        self.real_calls.append(url)
        return 200

    async def install(self, shim: SubmissionShim) -> None:
        original = self.fetch
        self._saved_fetch = original

        async def shimmed(url: str) -> int:
            decision = shim.decide(url)
            if decision is InterceptDecision.SHORT_CIRCUIT:
                self.short_circuited.append(url)
                return 200
            return await original(url)

        self.fetch = shimmed

    async def restore(self) -> None:
        if self._saved_fetch is not None:
            self.fetch = self._saved_fetch
            self._saved_fetch = None

    def real_submissions(self) -> list[str]:
        return [url for url in self.real_calls if "formResponse" in url]


class FakeRsvpForm:  # pylint: disable=too-many-instance-attributes
    """In-memory RSVP form: requires a name, an email with '@' and an attending choice."""

    def __init__(self, network: FakeNetwork) -> None:
        self._network = network
        self.values = {name: "" for name in TEXT_FIELDS}
        self.checked = {group: dict.fromkeys(CHOICE_OPTIONS, False) for group in CHOICE_GROUPS}
        self.display = ""
        self.success_visible = False
        self.error_fields: set[str] = set()
        self.guest_fields_visible = False
        self.change_events: list[tuple[str, str]] = []
        self.submit_count = 0
        self.reset_count = 0

    async def reset(self) -> None:
        self.reset_count += 1
        self.values = {name: "" for name in TEXT_FIELDS}
        self.checked = {group: dict.fromkeys(CHOICE_OPTIONS, False) for group in CHOICE_GROUPS}
        self.display = ""
        self.success_visible = False
        self.error_fields = set()

    async def fill_text(self, field: str, value: str) -> None:
        self.values[field] = value

    async def set_choice(self, group: str, option: str | None) -> None:
        for candidate in CHOICE_OPTIONS:
            self.checked[group][candidate] = candidate == option

    async def notify_choice_changed(self, group: str, option: str) -> None:
        self.change_events.append((group, option))
        if group == "attending":
            self.guest_fields_visible = self.checked["attending"]["yes"]

    async def request_submit(self) -> None:
        self.submit_count += 1
        await self._network.fetch(ANALYTICS_URL)
        errors = set()
        if not self.values["name"].strip():
            errors.add("name")
        if "@" not in self.values["email"]:
            errors.add("email")
        if not any(self.checked["attending"].values()):
            errors.add("attending")
        if errors:
            self.error_fields = errors
            return
        await self._network.fetch(SUBMISSION_URL)
        self.display = "none"
        self.success_visible = True

    def is_pristine(self) -> bool:
        return (
            all(value == "" for value in self.values.values())
            and not any(option for group in self.checked.values() for option in group.values())
            and self.display == ""
            and not self.success_visible
            and not self.error_fields
        )


class FakeTableSource:
    """Table source serving fixed text, or failing with a LoadError."""

    def __init__(self, text: str = "", *, status: int | None = None) -> None:
        self._text = text
        self._status = status
        self.requested: list[str] = []

    async def read_text(self, location: str) -> str:
        self.requested.append(location)
        if self._status is not None:
            raise LoadError(f"Failed to load {location} ({self._status}).", status=self._status)
        return self._text


class RecordingReporter:
    """Reporter that keeps every callback for assertions."""

    def __init__(self) -> None:
        self.started_with: int | None = None
        self.outcomes: list = []
        self.summary = None

    def run_started(self, total: int) -> None:
        self.started_with = total

    def case_finished(self, outcome) -> None:
        self.outcomes.append(outcome)

    def run_finished(self, summary) -> None:
        self.summary = summary


@pytest.fixture
def no_wait_timing() -> TimingSettings:
    return TimingSettings(settle_ms=0, observe_ms=0, between_tests_ms=0)


@pytest.fixture
def fake_network() -> FakeNetwork:
    return FakeNetwork()


@pytest.fixture
def fake_form(fake_network: FakeNetwork) -> FakeRsvpForm:
    return FakeRsvpForm(fake_network)


@pytest.fixture
def table_source_factory():
    return FakeTableSource


@pytest.fixture
def recording_reporter() -> RecordingReporter:
    return RecordingReporter()
