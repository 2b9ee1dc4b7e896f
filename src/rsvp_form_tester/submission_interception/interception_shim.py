"""Outbound request interception service."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol

from playwright.async_api import Page, Route

from .interception_context import InterceptDecision, IterationContext

_LOGGER = logging.getLogger(__name__)

ROUTE_PATTERN = "**/*"


class InterceptionError(Exception):
    """Raised when the shim cannot be installed or removed."""


class SubmissionShim:  # pylint: disable=too-few-public-methods
    """Classifies outbound requests and records submission attempts."""

    def __init__(self, context: IterationContext, endpoint_marker: str) -> None:
        if not endpoint_marker:
            raise InterceptionError("Endpoint marker must not be empty.")
        self._context = context
        self._endpoint_marker = endpoint_marker

    def decide(self, url: str) -> InterceptDecision:
        if self._endpoint_marker not in url:
            return InterceptDecision.PASS_THROUGH
        self._context.submission_attempted = True
        if self._context.allow_real:
            self._context.forwarded = True
            _LOGGER.info("Forwarding submission to %s", url)
            return InterceptDecision.FORWARD
        _LOGGER.info("Short-circuiting submission to %s", url)
        return InterceptDecision.SHORT_CIRCUIT


class NetworkBoundary(Protocol):
    """Protocol for the outbound request boundary of the page under test."""

    async def install(self, shim: SubmissionShim) -> None: ...

    async def restore(self) -> None: ...


class PlaywrightRouteBoundary:
    """Network boundary backed by Playwright request routing on one page."""

    def __init__(self, page: Page) -> None:
        self._page = page
        self._shim: SubmissionShim | None = None
        self._handler = self._handle_route

    @property
    def installed(self) -> bool:
        return self._shim is not None

    async def install(self, shim: SubmissionShim) -> None:
        if self._shim is not None:
            raise InterceptionError("A submission shim is already installed on this page.")
        self._shim = shim
        await self._page.route(ROUTE_PATTERN, self._handler)

    async def restore(self) -> None:
        if self._shim is None:
            return
        await self._page.unroute(ROUTE_PATTERN, self._handler)
        self._shim = None

    async def _handle_route(self, route: Route) -> None:
        if self._shim is None:
            await route.continue_()
            return
        decision = self._shim.decide(route.request.url)
        if decision is InterceptDecision.SHORT_CIRCUIT:
            await route.fulfill(status=200, body="")
            return
        await route.continue_()


@asynccontextmanager
async def installed_shim(boundary: NetworkBoundary, shim: SubmissionShim) -> AsyncIterator[None]:
    """Keep `shim` installed on `boundary` for the duration of the block."""
    await boundary.install(shim)
    try:
        yield
    finally:
        await boundary.restore()
