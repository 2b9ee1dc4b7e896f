"""Test table retrieval service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol
from urllib.parse import urljoin

from playwright.async_api import APIRequestContext
from playwright.async_api import Error as PlaywrightError

from .table_reader import LoadError, parse_table
from .testcase_models import RsvpTestCase

_LOGGER = logging.getLogger(__name__)


class TableSource(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for anything that can hand back the raw test table text."""

    async def read_text(self, location: str) -> str: ...


class PageRequestTableSource:  # pylint: disable=too-few-public-methods
    """Fetches the table over HTTP relative to the page under test."""

    def __init__(self, request_context: APIRequestContext, base_url: str) -> None:
        self._request_context = request_context
        self._base_url = base_url

    def resolve(self, location: str) -> str:
        return urljoin(self._base_url, location)

    async def read_text(self, location: str) -> str:
        url = self.resolve(location)
        try:
            response = await self._request_context.get(url)
        except PlaywrightError as exc:
            raise LoadError(
                f"Failed to load {url} ({exc}). "
                "Make sure the location is relative to the site root."
            ) from exc
        if not response.ok:
            raise LoadError(
                f"Failed to load {url} ({response.status}). "
                "Make sure the location is relative to the site root.",
                status=response.status,
            )
        return await response.text()


class LocalFileTableSource:  # pylint: disable=too-few-public-methods
    """Reads the table from the local filesystem."""

    async def read_text(self, location: str) -> str:
        path = Path(location)
        if not path.is_file():
            raise LoadError(f"Test table file not found: {path.resolve()}")
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise LoadError(f"Failed to read {path.resolve()}: {exc}") from exc


async def load_testcases(source: TableSource, location: str) -> tuple[RsvpTestCase, ...]:
    """Read the table at `location` and parse it into test cases."""
    text = await source.read_text(location)
    testcases = parse_table(text)
    _LOGGER.info("Loaded %d test cases from %s", len(testcases), location)
    return testcases
