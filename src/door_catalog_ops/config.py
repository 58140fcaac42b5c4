"""Application configuration."""

import os
from datetime import UTC, datetime
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_PURGE_CUTOFF = datetime(2026, 2, 13, tzinfo=UTC)


class Settings(BaseSettings):
    """Maintenance settings loaded from environment variables."""

    supabase_url: str | None = None
    supabase_service_key: str | None = None
    base_url: str = "http://localhost:3000"
    http_timeout_seconds: float = 30.0
    uploads_root: Path = Path("public/uploads")
    uploads_prefix: str = "/uploads/"
    placeholder_path: str = "/uploads/placeholders/door-missing.svg"
    door_color_property: str = "Domeo_Модель_Цвет"
    cover_photo_type: str = "cover"
    workbook_path: Path = Path("1002/final_filled 30.01.xlsx")
    catalog_ids_path: Path = Path("scripts/catalog-tree-ids.json")
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cutoff(raw: str | None) -> datetime:
    """Parse an ISO date or datetime cutoff, defaulting to UTC."""
    if raw is None:
        return DEFAULT_PURGE_CUTOFF
    cleaned = raw.strip()
    if not cleaned:
        return DEFAULT_PURGE_CUTOFF
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    parsed = datetime.fromisoformat(cleaned)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
