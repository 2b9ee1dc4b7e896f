"""Test table entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Expectation(str, Enum):
    """Expected, or observed, outcome of submitting the form."""

    ACCEPT = "accept"
    REJECT = "reject"


@dataclass(frozen=True)
class RsvpTestCase:  # pylint: disable=too-many-instance-attributes
    """Normalized representation of one test table row.

    `expect` is None when the cell holds neither accept nor reject; the raw cell
    text is kept in `expect_text` so the case can be reported as failed.
    """

    line_number: int
    description: str
    expect: Expectation | None = Expectation.REJECT
    expect_text: str = ""
    name: str = ""
    email: str = ""
    attending: str = ""
    guestnames: str = ""
    dietary: str = ""
    song: str = ""
    advice: str = ""
    funfact: str = ""
    otherquestion: str = ""
    taxi: str = ""
