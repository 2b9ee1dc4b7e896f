"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TABLE_LOCATION = "test/test_validation.csv"
DEFAULT_ENDPOINT_MARKER = "formResponse"
SUPPORTED_BROWSERS: tuple[str, ...] = ("chromium", "firefox", "webkit")

TEXT_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "guestnames",
    "dietary",
    "song",
    "advice",
    "funfact",
    "otherquestion",
)
CHOICE_GROUPS: tuple[str, ...] = ("attending", "taxi")
CHOICE_OPTIONS: tuple[str, ...] = ("yes", "no")


def _default_text_field_ids() -> dict[str, str]:
    return {name: name for name in TEXT_FIELDS}


def _default_choice_ids() -> dict[str, dict[str, str]]:
    return {
        group: {option: f"{group}-{option}" for option in CHOICE_OPTIONS}
        for group in CHOICE_GROUPS
    }


@dataclass(frozen=True)
class SiteSettings:
    """Page under test and browser launch options."""

    url: str
    browser: str = "chromium"
    headless: bool = True


@dataclass(frozen=True)
class TableSettings:
    """Where the test table is fetched from, relative to the site root."""

    location: str = DEFAULT_TABLE_LOCATION


@dataclass(frozen=True)
class SubmissionSettings:
    """Identification of submission requests."""

    endpoint_marker: str = DEFAULT_ENDPOINT_MARKER


@dataclass(frozen=True)
class TimingSettings:
    """Fixed waits, in milliseconds, used between driver steps."""

    settle_ms: int = 150
    observe_ms: int = 300
    between_tests_ms: int = 100


@dataclass(frozen=True)
class FormLayout:
    """DOM element ids of the form under test."""

    form_id: str = "rsvpForm"
    success_message_id: str = "successMessage"
    success_visible_class: str = "visible"
    text_field_ids: Mapping[str, str] = field(default_factory=_default_text_field_ids)
    choice_ids: Mapping[str, Mapping[str, str]] = field(default_factory=_default_choice_ids)

    def element_ids(self) -> tuple[str, ...]:
        """Every element id the driver addresses, in a stable order."""
        ids = [self.form_id, self.success_message_id]
        ids.extend(self.text_field_ids[name] for name in TEXT_FIELDS)
        for group in CHOICE_GROUPS:
            ids.extend(self.choice_ids[group][option] for option in CHOICE_OPTIONS)
        return tuple(ids)


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    site: SiteSettings
    testcases: TableSettings
    submission: SubmissionSettings
    timing: TimingSettings
    form: FormLayout
