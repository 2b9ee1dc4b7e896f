"""Submission interception exports."""

from .interception_context import InterceptDecision, IterationContext
from .interception_shim import (
    InterceptionError,
    NetworkBoundary,
    PlaywrightRouteBoundary,
    SubmissionShim,
    installed_shim,
)

__all__ = [
    "InterceptDecision",
    "IterationContext",
    "InterceptionError",
    "NetworkBoundary",
    "PlaywrightRouteBoundary",
    "SubmissionShim",
    "installed_shim",
]
