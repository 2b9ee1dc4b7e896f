"""CSV test table template generation service."""

from __future__ import annotations

from pathlib import Path

from .constants import TABLE_COLUMNS


def build_table_template() -> str:
    """Return the header line of an empty test table."""
    return ",".join(TABLE_COLUMNS) + "\n"


def generate_table_template(output_path: Path | str) -> Path:
    """Write a header-only test table, refusing to overwrite an existing file."""
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Test table already exists: {destination.resolve()}")
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(build_table_template(), encoding="utf-8")
    return destination.resolve()
