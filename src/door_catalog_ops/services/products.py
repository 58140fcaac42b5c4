"""Bulk cleanup of door products."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from door_catalog_ops.domain.catalog import (
    DOORS_CATEGORY_NAME,
    DoorProduct,
    PurgeReport,
)
from door_catalog_ops.domain.errors import PreconditionError
from door_catalog_ops.services.catalog import CatalogRepository

_SAMPLE_SIZE = 5

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Persistence interface for catalog products."""

    def list_created_since(
        self, category_id: str, since: datetime
    ) -> list[DoorProduct]:
        """Return products of a category created at or after `since`."""

    def count_created_before(self, category_id: str, before: datetime) -> int:
        """Count products of a category created before `before`."""

    def delete_products(self, product_ids: list[str]) -> int:
        """Delete products by id and return how many were removed."""


@dataclass
class DoorProductPurgeService:
    """Removes door products created on or after a cutoff."""

    catalog_repository: CatalogRepository
    product_repository: ProductRepository

    def purge(self, cutoff: datetime, dry_run: bool = False) -> PurgeReport:
        """Delete door products created at or after the cutoff."""
        doors = self.catalog_repository.find_category_by_name(DOORS_CATEGORY_NAME)
        if doors is None:
            raise PreconditionError(f"Category not found: {DOORS_CATEGORY_NAME}")

        doomed = self.product_repository.list_created_since(doors.id, cutoff)
        kept = self.product_repository.count_created_before(doors.id, cutoff)
        sample = [product.sku or product.id for product in doomed[:_SAMPLE_SIZE]]
        _logger.info(
            "Door products before %s: %s kept, %s to delete",
            cutoff.isoformat(),
            kept,
            len(doomed),
        )
        deleted = 0
        if doomed and not dry_run:
            deleted = self.product_repository.delete_products(
                [product.id for product in doomed]
            )
        return PurgeReport(
            cutoff=cutoff,
            kept=kept,
            matched=len(doomed),
            deleted=deleted,
            sample_skus=sample,
            dry_run=dry_run,
        )
