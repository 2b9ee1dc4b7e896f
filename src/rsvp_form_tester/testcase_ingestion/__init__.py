"""Test table ingestion exports."""

from .table_reader import LoadError, TableFormatError, parse_table, parse_table_line
from .table_sources import (
    LocalFileTableSource,
    PageRequestTableSource,
    TableSource,
    load_testcases,
)
from .testcase_models import Expectation, RsvpTestCase

__all__ = [
    "Expectation",
    "RsvpTestCase",
    "LoadError",
    "TableFormatError",
    "parse_table",
    "parse_table_line",
    "TableSource",
    "PageRequestTableSource",
    "LocalFileTableSource",
    "load_testcases",
]
