"""Spreadsheet export introspection."""

from pathlib import Path

from openpyxl import load_workbook

from door_catalog_ops.domain.errors import PreconditionError
from door_catalog_ops.domain.workbook import SheetOutline


def inspect_workbook(path: Path) -> list[SheetOutline]:
    """Return each sheet with the non-empty cells of its header row."""
    if not path.is_file():
        raise PreconditionError(f"Workbook not found: {path}")
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        outlines = []
        for sheet in workbook.worksheets:
            first_row = next(sheet.iter_rows(max_row=1, values_only=True), ())
            headers = [
                (index, str(value).strip())
                for index, value in enumerate(first_row, start=1)
                if value is not None and str(value).strip()
            ]
            outlines.append(SheetOutline(name=sheet.title, headers=headers))
        return outlines
    finally:
        workbook.close()
