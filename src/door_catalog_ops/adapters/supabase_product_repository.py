"""Supabase implementation for catalog products."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from door_catalog_ops.adapters.supabase_photo_repository import fetch_all
from door_catalog_ops.domain.catalog import DoorProduct
from door_catalog_ops.services.products import ProductRepository

_TABLE = "products"
_DELETE_BATCH = 200


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase-backed repository for products."""

    client: Client

    def list_created_since(
        self, category_id: str, since: datetime
    ) -> list[DoorProduct]:
        """Return products of a category created at or after `since`."""
        rows = fetch_all(
            lambda: self.client.table(_TABLE)
            .select("id, sku, created_at")
            .eq("catalog_category_id", category_id)
            .gte("created_at", since.isoformat())
            .order("id")
        )
        return [_parse_product(row) for row in rows]

    def count_created_before(self, category_id: str, before: datetime) -> int:
        """Count products of a category created before `before`."""
        response = (
            self.client.table(_TABLE)
            .select("id", count="exact")
            .eq("catalog_category_id", category_id)
            .lt("created_at", before.isoformat())
            .limit(1)
            .execute()
        )
        return int(response.count or 0)

    def delete_products(self, product_ids: list[str]) -> int:
        """Delete products in batches and return the number removed."""
        deleted = 0
        for start in range(0, len(product_ids), _DELETE_BATCH):
            batch = product_ids[start : start + _DELETE_BATCH]
            response = self.client.table(_TABLE).delete().in_("id", batch).execute()
            deleted += len(response.data or [])
        return deleted


def _parse_product(row: dict[str, object]) -> DoorProduct:
    """Parse a product row into a domain model."""
    sku = row.get("sku")
    return DoorProduct(
        id=str(row["id"]),
        sku=str(sku) if sku is not None else None,
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
