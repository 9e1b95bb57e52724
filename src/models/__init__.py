"""In-memory record types."""
from models.app_settings import SETTINGS_ID, AppSettings, ExportFormat, Theme
from models.category import DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_ICON, Category
from models.prompt import Prompt
from models.usage_history import UsageHistory

__all__ = [
    "DEFAULT_CATEGORY_COLOR",
    "DEFAULT_CATEGORY_ICON",
    "SETTINGS_ID",
    "AppSettings",
    "Category",
    "ExportFormat",
    "Prompt",
    "Theme",
    "UsageHistory",
]
