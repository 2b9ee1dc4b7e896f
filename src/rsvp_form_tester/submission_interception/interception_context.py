"""Submission interception entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InterceptDecision(str, Enum):
    """What to do with one outbound request."""

    PASS_THROUGH = "pass_through"
    FORWARD = "forward"
    SHORT_CIRCUIT = "short_circuit"


@dataclass
class IterationContext:
    """Flags shared by the shim and the driver during one test case.

    `submission_attempted` is written by the shim and read by the driver,
    `allow_real` the other way round. `forwarded` tells whether the attempt
    reached the real endpoint.
    """

    submission_attempted: bool = False
    allow_real: bool = False
    forwarded: bool = False

    def reset(self) -> None:
        self.submission_attempted = False
        self.allow_real = False
        self.forwarded = False

    def arm(self, *, allow_real: bool) -> None:
        """Prepare for a submit: forget earlier attempts, set the forwarding policy."""
        self.submission_attempted = False
        self.forwarded = False
        self.allow_real = allow_real
