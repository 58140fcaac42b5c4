"""Placeholder sweep for photo paths flagged as unusable."""

import logging
from dataclasses import dataclass, field

from door_catalog_ops.domain.photos import SweepReport
from door_catalog_ops.services.photos import PhotoRepository

PROBLEM_MARKERS = (
    "не рассматриваем эту модель",
    "пока не добавляем - необходимо сделать новый вариант модели",
)

_logger = logging.getLogger(__name__)


@dataclass
class PlaceholderSweepService:
    """Rewrites photo paths carrying a "do not use" marker to the placeholder."""

    repository: PhotoRepository
    placeholder: str
    markers: tuple[str, ...] = field(default=PROBLEM_MARKERS)

    def sweep(self, dry_run: bool = False) -> SweepReport:
        """Replace every marked path and report before/after counts."""
        before = self.repository.count_paths_containing(self.markers)
        if dry_run or before == 0:
            return SweepReport(before=before, updated=0, after=before, dry_run=dry_run)
        updated = self.repository.update_paths_containing(
            self.markers, self.placeholder
        )
        after = self.repository.count_paths_containing(self.markers)
        if after:
            _logger.warning("%s marked photo paths remain after sweep", after)
        return SweepReport(before=before, updated=updated, after=after)
