"""Supabase-backed property photo repository."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from supabase import Client

from door_catalog_ops.domain.photos import PhotoRecord
from door_catalog_ops.services.photos import PhotoRepository

PAGE_SIZE = 1000

_TABLE = "property_photos"


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for property photo persistence."""

    client: Client

    def list_photos(self, property_name: str, photo_type: str) -> list[PhotoRecord]:
        """Return all photo rows for a property, reading every page."""
        rows = fetch_all(
            lambda: self.client.table(_TABLE)
            .select("id, property_name, property_value, photo_type, photo_path")
            .eq("property_name", property_name)
            .eq("photo_type", photo_type)
            .order("id")
        )
        return [_parse_photo(row) for row in rows]

    def update_photo_path(self, photo_id: str, photo_path: str) -> PhotoRecord:
        """Rewrite a photo path and return the updated row."""
        response = (
            self.client.table(_TABLE)
            .update({"photo_path": photo_path})
            .eq("id", photo_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to update photo {photo_id}")
        return _parse_photo(response.data[0])

    def count_paths_containing(self, markers: Sequence[str]) -> int:
        """Count distinct rows whose path contains any marker."""
        ids: set[str] = set()
        for marker in markers:
            pattern = _contains(marker)
            rows = fetch_all(
                lambda pattern=pattern: self.client.table(_TABLE)
                .select("id")
                .like("photo_path", pattern)
                .order("id")
            )
            ids.update(str(row["id"]) for row in rows)
        return len(ids)

    def update_paths_containing(self, markers: Sequence[str], photo_path: str) -> int:
        """Rewrite rows whose path contains any marker."""
        updated = 0
        for marker in markers:
            response = (
                self.client.table(_TABLE)
                .update({"photo_path": photo_path})
                .like("photo_path", _contains(marker))
                .execute()
            )
            updated += len(response.data or [])
        return updated


def fetch_all(build_query: Callable[[], Any]) -> list[dict[str, object]]:
    """Execute a select query page by page until a short page is returned."""
    rows: list[dict[str, object]] = []
    offset = 0
    while True:
        response = build_query().range(offset, offset + PAGE_SIZE - 1).execute()
        page = response.data or []
        rows.extend(page)
        if len(page) < PAGE_SIZE:
            return rows
        offset += PAGE_SIZE


def _contains(marker: str) -> str:
    return f"%{marker}%"


def _parse_photo(row: dict[str, object]) -> PhotoRecord:
    """Parse a photo row into a domain model."""
    return PhotoRecord(
        id=str(row["id"]),
        property_name=str(row.get("property_name") or ""),
        property_value=str(row.get("property_value") or ""),
        photo_type=str(row.get("photo_type") or ""),
        photo_path=str(row.get("photo_path") or ""),
    )
