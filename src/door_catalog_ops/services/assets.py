"""Local uploads presence checks."""

import stat
from dataclasses import dataclass
from pathlib import Path

from door_catalog_ops.domain.errors import AssetProbeError

_EXTERNAL_SCHEMES = ("http://", "https://")


def is_external(photo_path: str) -> bool:
    """Return whether a photo path is an absolute http(s) URL."""
    return photo_path.startswith(_EXTERNAL_SCHEMES)


@dataclass(frozen=True)
class LocalAssetResolver:
    """Maps stored `/uploads/...` paths onto the local uploads directory."""

    root: Path
    prefix: str = "/uploads/"
    placeholder: str = "/uploads/placeholders/door-missing.svg"

    def is_local(self, photo_path: str) -> bool:
        """Return whether a path refers to a real local asset.

        The placeholder shares the uploads prefix but never counts as a
        local asset, so it cannot outrank a genuine photo.
        """
        return photo_path.startswith(self.prefix) and photo_path != self.placeholder

    def resolve(self, photo_path: str) -> Path | None:
        """Return the filesystem location of a local path, if it is one."""
        if not photo_path.startswith(self.prefix):
            return None
        relative = photo_path[len(self.prefix) :]
        root = self.root.resolve()
        candidate = (root / relative).resolve()
        if candidate != root and root not in candidate.parents:
            return None
        return candidate

    def is_present(self, photo_path: str) -> bool:
        """Return whether a local path points at an existing regular file.

        Raises AssetProbeError when the filesystem cannot be read; a missing
        file is the only condition reported as False.
        """
        if not self.is_local(photo_path):
            return False
        location = self.resolve(photo_path)
        if location is None:
            return False
        try:
            mode = location.stat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as exc:
            raise AssetProbeError(f"Cannot inspect {location}: {exc}") from exc
        return stat.S_ISREG(mode)
