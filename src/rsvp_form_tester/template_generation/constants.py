"""Shared test table constants."""

from __future__ import annotations

METADATA_COLUMNS: tuple[str, ...] = ("description", "expect")
FIELD_COLUMNS: tuple[str, ...] = (
    "name",
    "email",
    "attending",
    "guestnames",
    "dietary",
    "song",
    "advice",
    "funfact",
    "otherquestion",
    "taxi",
)
TABLE_COLUMNS: tuple[str, ...] = METADATA_COLUMNS + FIELD_COLUMNS
