"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from .runtime_settings import (
    CHOICE_GROUPS,
    CHOICE_OPTIONS,
    DEFAULT_ENDPOINT_MARKER,
    DEFAULT_TABLE_LOCATION,
    SUPPORTED_BROWSERS,
    TEXT_FIELDS,
    Configuration,
    FormLayout,
    SiteSettings,
    SubmissionSettings,
    TableSettings,
    TimingSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        site=_parse_site_section(parsed.get("site")),
        testcases=_parse_testcases_section(parsed.get("testcases")),
        submission=_parse_submission_section(parsed.get("submission")),
        timing=_parse_timing_section(parsed.get("timing")),
        form=_parse_form_section(parsed.get("form")),
    )


def _parse_site_section(value: Any) -> SiteSettings:
    section = _require_mapping(value, "site")
    url = _require_non_empty_string(section.get("url"), "site.url")
    parsed_url = urlparse(url)
    if parsed_url.scheme not in {"http", "https", "file"}:
        raise ConfigurationError("site.url must be an http(s) or file URL.")
    browser = _require_non_empty_string(section.get("browser", "chromium"), "site.browser").lower()
    if browser not in SUPPORTED_BROWSERS:
        raise ConfigurationError(
            f"site.browser must be one of: {', '.join(SUPPORTED_BROWSERS)}."
        )
    headless = _require_bool(section.get("headless", True), "site.headless")
    return SiteSettings(url=url, browser=browser, headless=headless)


def _parse_testcases_section(value: Any) -> TableSettings:
    section = _optional_mapping(value, "testcases")
    location = _require_non_empty_string(
        section.get("location", DEFAULT_TABLE_LOCATION), "testcases.location"
    )
    return TableSettings(location=location)


def _parse_submission_section(value: Any) -> SubmissionSettings:
    section = _optional_mapping(value, "submission")
    marker = _require_non_empty_string(
        section.get("endpoint_marker", DEFAULT_ENDPOINT_MARKER), "submission.endpoint_marker"
    )
    return SubmissionSettings(endpoint_marker=marker)


def _parse_timing_section(value: Any) -> TimingSettings:
    section = _optional_mapping(value, "timing")
    defaults = TimingSettings()
    return TimingSettings(
        settle_ms=_require_non_negative_int(
            section.get("settle_ms", defaults.settle_ms), "timing.settle_ms"
        ),
        observe_ms=_require_non_negative_int(
            section.get("observe_ms", defaults.observe_ms), "timing.observe_ms"
        ),
        between_tests_ms=_require_non_negative_int(
            section.get("between_tests_ms", defaults.between_tests_ms),
            "timing.between_tests_ms",
        ),
    )


def _parse_form_section(value: Any) -> FormLayout:
    section = _optional_mapping(value, "form")
    defaults = FormLayout()
    text_field_ids = dict(defaults.text_field_ids)
    overrides = _optional_mapping(section.get("field_ids"), "form.field_ids")
    for name, element_id in overrides.items():
        if name not in TEXT_FIELDS:
            raise ConfigurationError(f"form.field_ids '{name}' is not a form text field.")
        text_field_ids[name] = _require_non_empty_string(element_id, f"form.field_ids.{name}")

    choice_ids = {group: dict(options) for group, options in defaults.choice_ids.items()}
    choice_overrides = _optional_mapping(section.get("choice_ids"), "form.choice_ids")
    for group, options in choice_overrides.items():
        if group not in CHOICE_GROUPS:
            raise ConfigurationError(f"form.choice_ids '{group}' is not a choice group.")
        for option, element_id in _require_mapping(options, f"form.choice_ids.{group}").items():
            if option not in CHOICE_OPTIONS:
                raise ConfigurationError(
                    f"form.choice_ids.{group} option '{option}' must be 'yes' or 'no'."
                )
            choice_ids[group][option] = _require_non_empty_string(
                element_id, f"form.choice_ids.{group}.{option}"
            )

    return FormLayout(
        form_id=_require_non_empty_string(section.get("form_id", defaults.form_id), "form.form_id"),
        success_message_id=_require_non_empty_string(
            section.get("success_message_id", defaults.success_message_id),
            "form.success_message_id",
        ),
        success_visible_class=_require_non_empty_string(
            section.get("success_visible_class", defaults.success_visible_class),
            "form.success_visible_class",
        ),
        text_field_ids=text_field_ids,
        choice_ids=choice_ids,
    )


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
