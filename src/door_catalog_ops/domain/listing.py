"""Models for the storefront door listing payload."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ListingModel(BaseModel):
    """Door model entry of the complete-data payload."""

    model_config = ConfigDict(
        extra="allow", populate_by_name=True, protected_namespaces=()
    )

    model_key: str | None = Field(default=None, alias="modelKey")
    model: str | None = None
    sizes: Any = None
    coatings: Any = None
    products: Any = None


class ListingData(BaseModel):
    """Body of the complete-data payload."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    models: list[ListingModel] = Field(default_factory=list)
    styles: list[Any] = Field(default_factory=list)
    total_models: int | None = Field(default=None, alias="totalModels")


class ListingEnvelope(BaseModel):
    """Complete-data response wrapper."""

    model_config = ConfigDict(extra="allow")

    data: ListingData | None = None


@dataclass(frozen=True)
class ListingSummary:
    """Sanity report of the door listing API."""

    total_models: int
    styles: list[str]
    total_products: int
    first_model_key: str | None
    first_model_sizes: int
    first_model_coatings: int
