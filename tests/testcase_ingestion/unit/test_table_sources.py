"""Test table retrieval tests."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from playwright.async_api import Error as PlaywrightError
from rsvp_form_tester.testcase_ingestion.table_reader import LoadError
from rsvp_form_tester.testcase_ingestion.table_sources import (
    LocalFileTableSource,
    PageRequestTableSource,
    load_testcases,
)

TABLE_TEXT = "description,expect,name\nValid,accept,Ann\n"


class _FakeResponse:
    def __init__(self, status: int, text: str = "") -> None:
        self.status = status
        self._text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    async def text(self) -> str:
        return self._text


class _FakeRequestContext:
    def __init__(self, response: _FakeResponse | None = None, error: Exception | None = None):
        self._response = response
        self._error = error
        self.urls: list[str] = []

    async def get(self, url: str) -> _FakeResponse:
        self.urls.append(url)
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


def test_page_request_source_resolves_location_against_site_root() -> None:
    context = _FakeRequestContext(_FakeResponse(200, TABLE_TEXT))
    source = PageRequestTableSource(context, "http://localhost:8000/rsvp/index.html")

    text = asyncio.run(source.read_text("test/test_validation.csv"))

    assert text == TABLE_TEXT
    assert context.urls == ["http://localhost:8000/rsvp/test/test_validation.csv"]


def test_page_request_source_reports_status_on_non_success() -> None:
    source = PageRequestTableSource(
        _FakeRequestContext(_FakeResponse(404)), "http://localhost:8000/"
    )

    with pytest.raises(LoadError) as excinfo:
        asyncio.run(source.read_text("test/test_validation.csv"))

    assert excinfo.value.status == 404
    assert "(404)" in str(excinfo.value)
    assert "site root" in str(excinfo.value)


def test_page_request_source_wraps_request_failures() -> None:
    source = PageRequestTableSource(
        _FakeRequestContext(error=PlaywrightError("net::ERR_CONNECTION_REFUSED")),
        "http://localhost:8000/",
    )

    with pytest.raises(LoadError, match="ERR_CONNECTION_REFUSED") as excinfo:
        asyncio.run(source.read_text("test/test_validation.csv"))

    assert excinfo.value.status is None
    assert "relative to the site root" in str(excinfo.value)


def test_local_file_source_reads_table(tmp_path: Path) -> None:
    table_path = tmp_path / "cases.csv"
    table_path.write_text(TABLE_TEXT, encoding="utf-8")

    testcases = asyncio.run(load_testcases(LocalFileTableSource(), str(table_path)))

    assert [testcase.name for testcase in testcases] == ["Ann"]


def test_local_file_source_fails_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LoadError, match="not found"):
        asyncio.run(LocalFileTableSource().read_text(str(tmp_path / "missing.csv")))
