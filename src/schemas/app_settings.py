"""Pydantic schemas for application settings endpoints."""
from datetime import datetime
from typing import Any

from pydantic import ValidationInfo, field_validator

from models.app_settings import ExportFormat, Theme
from schemas.base import CamelModel
from schemas.validators import reject_null


class SettingsUpdate(CamelModel):
    """Schema for partially updating settings. Any subset of fields may be sent."""

    theme: Theme | None = None
    auto_save: bool | None = None
    sync_enabled: bool | None = None
    sync_provider: str | None = None
    export_format: ExportFormat | None = None
    particle_effects: bool | None = None
    sound_effects: bool | None = None

    @field_validator(
        "theme",
        "auto_save",
        "sync_enabled",
        "export_format",
        "particle_effects",
        "sound_effects",
    )
    @classmethod
    def check_not_null(cls, v: Any, info: ValidationInfo) -> Any:
        """Only syncProvider may be cleared."""
        return reject_null(v, info.field_name)


class SettingsResponse(CamelModel):
    """Schema for settings responses."""

    id: str
    theme: Theme
    auto_save: bool
    sync_enabled: bool
    sync_provider: str | None
    export_format: ExportFormat
    particle_effects: bool
    sound_effects: bool
    updated_at: datetime
