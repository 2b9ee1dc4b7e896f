"""Template generation exports."""

from .constants import FIELD_COLUMNS, METADATA_COLUMNS, TABLE_COLUMNS
from .table_template_builder import build_table_template, generate_table_template

__all__ = [
    "METADATA_COLUMNS",
    "FIELD_COLUMNS",
    "TABLE_COLUMNS",
    "build_table_template",
    "generate_table_template",
]
