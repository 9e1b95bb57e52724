"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # AI prompt generation - OpenAI-compatible chat completions provider.
    # Both must be set for /api/generate-prompt to be available.
    ai_base_url: str = Field(default="", validation_alias="AI_INTEGRATIONS_OPENAI_BASE_URL")
    ai_api_key: str = Field(default="", validation_alias="AI_INTEGRATIONS_OPENAI_API_KEY")
    ai_model: str = Field(default="gpt-4o-mini", validation_alias="AI_MODEL")
    ai_timeout: float = Field(default=60.0, validation_alias="AI_TIMEOUT")

    # CORS - comma-separated list of allowed origins (stored as string, parsed via property)
    cors_origins_str: str = Field(
        default="http://localhost:5173",
        validation_alias="CORS_ORIGINS",
    )

    # Populate the store with the default categories at startup
    seed_default_categories: bool = Field(default=True, validation_alias="SEED_DEFAULT_CATEGORIES")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Server bind address, used by `python -m api`
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=5000, validation_alias="PORT")

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins string into a list."""
        if not self.cors_origins_str:
            return []
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def ai_configured(self) -> bool:
        """Whether both AI provider credentials are present."""
        return bool(self.ai_base_url.strip() and self.ai_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
