"""Supabase implementation for catalog categories."""

from dataclasses import dataclass

from supabase import Client

from door_catalog_ops.domain.catalog import CatalogCategory
from door_catalog_ops.services.catalog import CatalogRepository

_TABLE = "catalog_categories"


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase-backed repository for the category tree."""

    client: Client

    def find_category(self, name: str, parent_id: str | None) -> CatalogCategory | None:
        """Return a category by name under a parent, if present."""
        query = self.client.table(_TABLE).select("*").eq("name", name)
        if parent_id is None:
            query = query.is_("parent_id", "null")
        else:
            query = query.eq("parent_id", parent_id)
        response = query.limit(1).execute()
        if not response.data:
            return None
        return _parse_category(response.data[0])

    def find_category_by_name(self, name: str) -> CatalogCategory | None:
        """Return the first category with a name, if present."""
        response = (
            self.client.table(_TABLE).select("*").eq("name", name).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_category(response.data[0])

    def create_category(  # noqa: PLR0913
        self,
        name: str,
        parent_id: str | None,
        level: int,
        path: str,
        sort_order: int,
    ) -> CatalogCategory:
        """Create a category and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "name": name,
                    "parent_id": parent_id,
                    "level": level,
                    "path": path,
                    "sort_order": sort_order,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to create category {name}")
        return _parse_category(response.data[0])


def _parse_category(row: dict[str, object]) -> CatalogCategory:
    """Parse a category row into a domain model."""
    parent_id = row.get("parent_id")
    return CatalogCategory(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        parent_id=str(parent_id) if parent_id is not None else None,
        level=int(row.get("level") or 0),
        path=str(row.get("path") or ""),
        sort_order=int(row.get("sort_order") or 0),
    )
