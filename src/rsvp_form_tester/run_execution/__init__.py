"""Run execution domain exports."""

from .run_contracts import RunOutcome, RunRequest
from .validation_run_use_case import (
    RunExecutionError,
    execute_form_validation_run,
    open_site_page,
)
from .validation_session import SessionCollaborators, run_validation_session

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "SessionCollaborators",
    "execute_form_validation_run",
    "open_site_page",
    "run_validation_session",
]
