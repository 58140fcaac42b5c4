"""Photo path reconciliation for property cover photos."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from door_catalog_ops.domain.photos import (
    GroupResolution,
    GroupTarget,
    PhotoRecord,
    PhotoUpdate,
    ReconciliationPolicy,
    ReconciliationReport,
)
from door_catalog_ops.services.assets import LocalAssetResolver, is_external

_logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for property photos."""

    def list_photos(self, property_name: str, photo_type: str) -> list[PhotoRecord]:
        """Return every photo row for a property name and photo type."""

    def update_photo_path(self, photo_id: str, photo_path: str) -> PhotoRecord:
        """Rewrite the path of a single photo row and return it."""

    def count_paths_containing(self, markers: Sequence[str]) -> int:
        """Count rows whose path contains any of the markers."""

    def update_paths_containing(self, markers: Sequence[str], photo_path: str) -> int:
        """Rewrite every row whose path contains any marker; return the count."""


def group_by_value(records: Iterable[PhotoRecord]) -> dict[str, list[PhotoRecord]]:
    """Partition records by property value, keeping retrieval order."""
    groups: dict[str, list[PhotoRecord]] = {}
    for record in records:
        groups.setdefault(record.property_value, []).append(record)
    return groups


def compute_targets(
    records: Iterable[PhotoRecord],
    policy: ReconciliationPolicy,
    resolver: LocalAssetResolver,
) -> dict[str, GroupTarget]:
    """Pick the authoritative path for every property value group.

    Among several qualifying local paths the lexicographically smallest one
    wins, so the outcome does not depend on store retrieval order.
    Under prefer-local a group already holding the placeholder falls back to
    it when no real local path exists.
    """
    targets: dict[str, GroupTarget] = {}
    for value, group in group_by_value(records).items():
        candidates = sorted(
            {
                record.photo_path
                for record in group
                if _qualifies(record.photo_path, policy, resolver)
            }
        )
        if candidates:
            targets[value] = GroupTarget(candidates[0], GroupResolution.LOCAL)
        elif policy is ReconciliationPolicy.VERIFY_AND_CONVERGE or any(
            record.photo_path == resolver.placeholder for record in group
        ):
            targets[value] = GroupTarget(
                resolver.placeholder, GroupResolution.PLACEHOLDER
            )
        else:
            targets[value] = GroupTarget(None, GroupResolution.UNRESOLVED)
    return targets


def plan_updates(
    records: Iterable[PhotoRecord],
    targets: dict[str, GroupTarget],
    policy: ReconciliationPolicy,
) -> list[PhotoUpdate]:
    """Return the row rewrites needed to apply the group targets."""
    updates: list[PhotoUpdate] = []
    for record in records:
        target = targets[record.property_value]
        if target.path is None or record.photo_path == target.path:
            continue
        if policy is ReconciliationPolicy.PREFER_LOCAL and not is_external(
            record.photo_path
        ):
            continue
        updates.append(
            PhotoUpdate(
                photo_id=record.id,
                property_value=record.property_value,
                old_path=record.photo_path,
                new_path=target.path,
            )
        )
    return updates


def _qualifies(
    photo_path: str, policy: ReconciliationPolicy, resolver: LocalAssetResolver
) -> bool:
    if not resolver.is_local(photo_path):
        return False
    if policy is ReconciliationPolicy.PREFER_LOCAL:
        return True
    return resolver.is_present(photo_path)


@dataclass
class PhotoReconciliationService:
    """Converges cover photo paths of the door color property."""

    repository: PhotoRepository
    resolver: LocalAssetResolver
    property_name: str
    photo_type: str = "cover"

    def reconcile(
        self, policy: ReconciliationPolicy, dry_run: bool = False
    ) -> ReconciliationReport:
        """Run one reconciliation pass and return its counters."""
        records = self.repository.list_photos(self.property_name, self.photo_type)
        _logger.info(
            "Loaded %s %s photos for %s",
            len(records),
            self.photo_type,
            self.property_name,
        )
        targets = compute_targets(records, policy, self.resolver)
        updates = plan_updates(records, targets, policy)
        for update in updates:
            _logger.debug(
                "%s: %s -> %s", update.property_value, update.old_path, update.new_path
            )
            if not dry_run:
                self.repository.update_photo_path(update.photo_id, update.new_path)

        resolutions = [target.resolution for target in targets.values()]
        return ReconciliationReport(
            policy=policy,
            total_groups=len(targets),
            groups_with_local=resolutions.count(GroupResolution.LOCAL),
            groups_with_placeholder=resolutions.count(GroupResolution.PLACEHOLDER),
            groups_unresolved=resolutions.count(GroupResolution.UNRESOLVED),
            updated_rows=len(updates),
            dry_run=dry_run,
        )
