"""Domain models for property photo reconciliation."""

from dataclasses import dataclass
from enum import Enum


class ReconciliationPolicy(Enum):
    """Precedence policy used to pick a group's authoritative photo path."""

    VERIFY_AND_CONVERGE = "verify-and-converge"
    PREFER_LOCAL = "prefer-local"


class GroupResolution(Enum):
    """How a property value group obtained its target path."""

    LOCAL = "local"
    PLACEHOLDER = "placeholder"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class PhotoRecord:
    """Represents a persisted property photo row."""

    id: str
    property_name: str
    property_value: str
    photo_type: str
    photo_path: str


@dataclass(frozen=True)
class GroupTarget:
    """Authoritative path chosen for one property value group."""

    path: str | None
    resolution: GroupResolution


@dataclass(frozen=True)
class PhotoUpdate:
    """A single pending photo path rewrite."""

    photo_id: str
    property_value: str
    old_path: str
    new_path: str


@dataclass(frozen=True)
class ReconciliationReport:
    """Summary counters of a reconciliation run."""

    policy: ReconciliationPolicy
    total_groups: int
    groups_with_local: int
    groups_with_placeholder: int
    groups_unresolved: int
    updated_rows: int
    dry_run: bool = False


@dataclass(frozen=True)
class SweepReport:
    """Counters of a problematic-path placeholder sweep."""

    before: int
    updated: int
    after: int
    dry_run: bool = False


@dataclass(frozen=True)
class LinkCheckResult:
    """Outcome of probing an external photo URL."""

    url: str
    property_value: str
    ok: bool
    status_code: int | None = None
    content_type: str | None = None
    error: str | None = None
