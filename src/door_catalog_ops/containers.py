"""Dependency container wiring for maintenance commands."""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass

from supabase import create_client

from door_catalog_ops.adapters.storefront_client import (
    HttpxStorefrontClient,
    StorefrontClient,
)
from door_catalog_ops.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from door_catalog_ops.adapters.supabase_photo_repository import SupabasePhotoRepository
from door_catalog_ops.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from door_catalog_ops.config import Settings
from door_catalog_ops.domain.errors import PreconditionError
from door_catalog_ops.services.assets import LocalAssetResolver
from door_catalog_ops.services.catalog import CatalogSeedService
from door_catalog_ops.services.links import PhotoLinkCheckService
from door_catalog_ops.services.listing import ListingVerificationService
from door_catalog_ops.services.photos import PhotoReconciliationService
from door_catalog_ops.services.placeholders import PlaceholderSweepService
from door_catalog_ops.services.products import DoorProductPurgeService


@dataclass
class OpsContainer:
    """Holds the dependencies of one maintenance run."""

    settings: Settings
    storefront_client: StorefrontClient
    reconciliation_service: PhotoReconciliationService
    sweep_service: PlaceholderSweepService
    link_check_service: PhotoLinkCheckService
    catalog_seed_service: CatalogSeedService
    purge_service: DoorProductPurgeService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> OpsContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if not (resolved_settings.supabase_url and resolved_settings.supabase_service_key):
        raise PreconditionError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set")
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    photo_repository = SupabasePhotoRepository(supabase_client)
    catalog_repository = SupabaseCatalogRepository(supabase_client)
    product_repository = SupabaseProductRepository(supabase_client)
    storefront_client = HttpxStorefrontClient.create(
        base_url=resolved_settings.base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    resolver = LocalAssetResolver(
        root=resolved_settings.uploads_root,
        prefix=resolved_settings.uploads_prefix,
        placeholder=resolved_settings.placeholder_path,
    )

    async def close_resources() -> None:
        await storefront_client.close()

    return OpsContainer(
        settings=resolved_settings,
        storefront_client=storefront_client,
        reconciliation_service=PhotoReconciliationService(
            repository=photo_repository,
            resolver=resolver,
            property_name=resolved_settings.door_color_property,
            photo_type=resolved_settings.cover_photo_type,
        ),
        sweep_service=PlaceholderSweepService(
            repository=photo_repository,
            placeholder=resolved_settings.placeholder_path,
        ),
        link_check_service=PhotoLinkCheckService(
            repository=photo_repository,
            client=storefront_client,
            property_name=resolved_settings.door_color_property,
            photo_type=resolved_settings.cover_photo_type,
        ),
        catalog_seed_service=CatalogSeedService(catalog_repository),
        purge_service=DoorProductPurgeService(
            catalog_repository=catalog_repository,
            product_repository=product_repository,
        ),
        close_resources=close_resources,
    )


@asynccontextmanager
async def open_container(
    settings: Settings | None = None,
    factory: Callable[[Settings | None], OpsContainer] = build_container,
) -> AsyncIterator[OpsContainer]:
    """Yield a container and always release its resources."""
    container = factory(settings)
    try:
        yield container
    finally:
        await container.close_resources()


@asynccontextmanager
async def open_listing_service(
    settings: Settings | None = None,
) -> AsyncIterator[ListingVerificationService]:
    """Yield a listing service that needs only the storefront API."""
    resolved_settings = settings or Settings()
    client = HttpxStorefrontClient.create(
        base_url=resolved_settings.base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    try:
        yield ListingVerificationService(client)
    finally:
        await client.close()
