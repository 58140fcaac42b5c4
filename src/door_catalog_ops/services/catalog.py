"""Catalog category tree seeding."""

import logging
from dataclasses import dataclass
from typing import Protocol

from door_catalog_ops.domain.catalog import (
    CATALOG_CHILD_NAMES,
    CATALOG_ROOT_NAME,
    CatalogCategory,
)

_logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Persistence interface for catalog categories."""

    def find_category(self, name: str, parent_id: str | None) -> CatalogCategory | None:
        """Return the category with a name under a parent, if present."""

    def find_category_by_name(self, name: str) -> CatalogCategory | None:
        """Return the first category with a name, if present."""

    def create_category(  # noqa: PLR0913
        self,
        name: str,
        parent_id: str | None,
        level: int,
        path: str,
        sort_order: int,
    ) -> CatalogCategory:
        """Create a category and return it."""


@dataclass
class CatalogSeedService:
    """Ensures the fixed catalog root and its top-level categories exist."""

    repository: CatalogRepository

    def seed(self) -> dict[str, str]:
        """Find or create the tree and return category ids keyed by name."""
        ids: dict[str, str] = {}
        root = self._ensure(CATALOG_ROOT_NAME, parent=None, sort_order=0)
        ids[root.name] = root.id
        for position, name in enumerate(CATALOG_CHILD_NAMES, start=1):
            child = self._ensure(name, parent=root, sort_order=position)
            ids[child.name] = child.id
        return ids

    def _ensure(
        self, name: str, parent: CatalogCategory | None, sort_order: int
    ) -> CatalogCategory:
        parent_id = parent.id if parent else None
        existing = self.repository.find_category(name, parent_id)
        if existing is not None:
            _logger.info("Category exists: %s %s", existing.name, existing.id)
            return existing
        created = self.repository.create_category(
            name=name,
            parent_id=parent_id,
            level=parent.level + 1 if parent else 0,
            path=_child_path(parent) if parent else "",
            sort_order=sort_order,
        )
        _logger.info("Category created: %s %s", created.name, created.id)
        return created


def _child_path(parent: CatalogCategory) -> str:
    return f"{parent.path}/{parent.id}" if parent.path else parent.id
