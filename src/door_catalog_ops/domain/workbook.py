"""Domain models for spreadsheet export introspection."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SheetOutline:
    """Sheet name with its non-empty header cells (1-based column index)."""

    name: str
    headers: list[tuple[int, str]]
