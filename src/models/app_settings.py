"""Application settings record (process-wide singleton)."""
from dataclasses import dataclass
from datetime import datetime
from typing import Literal

SETTINGS_ID = "settings"

Theme = Literal["dark", "light"]
ExportFormat = Literal["json", "yaml", "markdown"]


@dataclass
class AppSettings:
    """User-facing preferences. Exactly one instance exists per store."""

    updated_at: datetime
    id: str = SETTINGS_ID
    theme: Theme = "dark"
    auto_save: bool = True
    sync_enabled: bool = False
    sync_provider: str | None = None
    export_format: ExportFormat = "json"
    particle_effects: bool = True
    sound_effects: bool = False
