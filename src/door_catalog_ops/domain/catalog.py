"""Domain models for catalog categories and door products."""

from dataclasses import dataclass
from datetime import datetime

CATALOG_ROOT_NAME = "Каталог"
DOORS_CATEGORY_NAME = "Межкомнатные двери"
CATALOG_CHILD_NAMES = (
    DOORS_CATEGORY_NAME,
    "Наличники",
    "Комплекты фурнитуры",
    "Ручки и завертки",
    "Ограничители",
)


@dataclass(frozen=True)
class CatalogCategory:
    """Represents a node of the catalog category tree."""

    id: str
    name: str
    parent_id: str | None
    level: int
    path: str
    sort_order: int


@dataclass(frozen=True)
class DoorProduct:
    """Minimal product data needed by maintenance workflows."""

    id: str
    sku: str | None
    created_at: datetime


@dataclass(frozen=True)
class PurgeReport:
    """Outcome of deleting door products created after a cutoff."""

    cutoff: datetime
    kept: int
    matched: int
    deleted: int
    sample_skus: list[str]
    dry_run: bool = False
