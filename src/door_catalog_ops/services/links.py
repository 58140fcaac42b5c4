"""Spot checks of external cover photo URLs."""

import logging
import re
from dataclasses import dataclass

import httpx

from door_catalog_ops.adapters.storefront_client import StorefrontClient
from door_catalog_ops.domain.photos import LinkCheckResult
from door_catalog_ops.services.assets import is_external
from door_catalog_ops.services.photos import PhotoRepository

_IMAGE_SUFFIX = re.compile(r"\.(jpg|jpeg|png|gif|webp|svg)(\?|$)", re.IGNORECASE)

_logger = logging.getLogger(__name__)


def looks_like_free_text(photo_path: str) -> bool:
    """Return whether a stored path is a note rather than a file reference."""
    return " " in photo_path and _IMAGE_SUFFIX.search(photo_path) is None


@dataclass
class PhotoLinkCheckService:
    """Probes a sample of external cover photo URLs with HEAD requests."""

    repository: PhotoRepository
    client: StorefrontClient
    property_name: str
    photo_type: str = "cover"

    def collect_urls(self) -> dict[str, str]:
        """Return distinct external URLs mapped to the first property value."""
        urls: dict[str, str] = {}
        for record in self.repository.list_photos(self.property_name, self.photo_type):
            path = record.photo_path.strip()
            if not path or looks_like_free_text(path) or not is_external(path):
                continue
            urls.setdefault(path, record.property_value)
        return urls

    async def check(self, sample_size: int = 15) -> list[LinkCheckResult]:
        """Probe up to `sample_size` URLs; network failures are reported per URL."""
        urls = self.collect_urls()
        results = []
        for url, value in list(urls.items())[:sample_size]:
            results.append(await self._probe(url, value))
        _logger.info(
            "Checked %s of %s external photo URLs", len(results), len(urls)
        )
        return results

    async def _probe(self, url: str, property_value: str) -> LinkCheckResult:
        try:
            status_code, content_type = await self.client.head(url)
        except httpx.HTTPError as exc:
            return LinkCheckResult(
                url=url, property_value=property_value, ok=False, error=str(exc)
            )
        content_type = content_type or ""
        ok = 200 <= status_code < 300 and (  # noqa: PLR2004
            content_type.startswith("image/") or "octet-stream" in content_type
        )
        return LinkCheckResult(
            url=url,
            property_value=property_value,
            ok=ok,
            status_code=status_code,
            content_type=content_type or None,
        )
