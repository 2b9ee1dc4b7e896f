"""Test table parsing service.

The table is a comma separated text whose first line names the columns. A
double quote toggles literal mode, so commas between quotes stay inside the
value; the quotes themselves are dropped. There is no escaped-quote syntax and
a value cannot span lines.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from rsvp_form_tester.template_generation import FIELD_COLUMNS

from .testcase_models import Expectation, RsvpTestCase

_LOGGER = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when the test table cannot be loaded."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class TableFormatError(LoadError):
    """Raised when the test table text is malformed."""


def parse_table_line(line: str) -> list[str]:
    """Split one table line into raw (untrimmed) values."""
    values: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)
    values.append("".join(current))
    return values


def parse_table(text: str) -> tuple[RsvpTestCase, ...]:
    """Parse the whole table text into test cases, in table order."""
    stripped = text.strip()
    if not stripped:
        return ()
    lines = stripped.split("\n")
    headers = [header.strip() for header in parse_table_line(lines[0])]
    if "description" not in headers:
        raise TableFormatError("Test table header must contain a 'description' column.")

    testcases: list[RsvpTestCase] = []
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        values = parse_table_line(line)
        row = {
            header: (values[index] if index < len(values) else "").strip()
            for index, header in enumerate(headers)
        }
        testcases.append(_build_testcase(line_number, row))
    return tuple(testcases)


def _build_testcase(line_number: int, row: Mapping[str, str]) -> RsvpTestCase:
    fields = {name: row.get(name, "") for name in FIELD_COLUMNS}
    return RsvpTestCase(
        line_number=line_number,
        description=row.get("description", ""),
        expect=_parse_expectation(row.get("expect", ""), line_number),
        expect_text=row.get("expect", ""),
        **fields,
    )


def _parse_expectation(value: str, line_number: int) -> Expectation | None:
    if not value:
        return Expectation.REJECT
    try:
        return Expectation(value.lower())
    except ValueError:
        allowed = ", ".join(item.value for item in Expectation)
        _LOGGER.warning(
            "Line %d: expect must be one of %s, got %r; the case will fail.",
            line_number,
            allowed,
            value,
        )
        return None
