"""Verification of the storefront door listing API."""

import logging
from dataclasses import dataclass

from door_catalog_ops.adapters.storefront_client import StorefrontClient
from door_catalog_ops.domain.listing import (
    ListingData,
    ListingEnvelope,
    ListingModel,
    ListingSummary,
)

_logger = logging.getLogger(__name__)


@dataclass
class ListingVerificationService:
    """Sanity checks against the complete-data endpoint."""

    client: StorefrontClient

    async def verify(self) -> ListingSummary:
        """Fetch the listing and summarize models, styles and sizes."""
        payload = await self.client.get_complete_data()
        data = parse_listing(payload)
        return summarize_listing(data)

    async def refresh_cache(self) -> object:
        """Clear the server-side complete-data cache."""
        result = await self.client.refresh_complete_data()
        _logger.info("complete-data cache refreshed")
        return result


def parse_listing(payload: dict[str, object]) -> ListingData:
    """Parse the enveloped payload, tolerating a bare data body."""
    envelope = ListingEnvelope.model_validate(payload)
    if envelope.data is not None:
        return envelope.data
    return ListingData.model_validate(payload)


def summarize_listing(data: ListingData) -> ListingSummary:
    """Build the listing sanity report."""
    models = data.models
    total_products = sum(
        _length(model.products if model.products is not None else model.sizes)
        for model in models
    )
    if total_products == 0 and models:
        total_products = sum(_length(model.sizes) for model in models)

    first: ListingModel | None = models[0] if models else None
    return ListingSummary(
        total_models=data.total_models
        if data.total_models is not None
        else len(models),
        styles=[str(style) for style in data.styles],
        total_products=total_products,
        first_model_key=(first.model_key or first.model) if first else None,
        first_model_sizes=_length(first.sizes) if first else 0,
        first_model_coatings=_length(first.coatings) if first else 0,
    )


def _length(value: object) -> int:
    return len(value) if isinstance(value, list) else 0
