"""
Configuration module - centralized settings for the entire application.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override in production, set environment variables:
        export GEMINI_API_KEY=your-google-ai-studio-key
        export GEMINI_MODEL=gemini-2.5-pro
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",        # Load from .env file in project root
        env_file_encoding="utf-8",
        extra="ignore",         # Ignore extra env vars not defined here
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "Bring To Life API"

    # DEBUG: Enable debug mode (more verbose errors, auto-reload in dev)
    DEBUG: bool = False

    # LOG_LEVEL: Level for the bringtolife.* loggers
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # GENERATION SETTINGS
    # ---------------------------------------------------------------------------
    # GEMINI_API_KEY: Google GenAI credential.
    # - Not checked at startup; a missing key fails the first generation call
    GEMINI_API_KEY: str = ""

    # GEMINI_MODEL: Multimodal model used to turn prompts/files into HTML apps
    GEMINI_MODEL: str = "gemini-3-pro-preview"

    # GENERATION_TEMPERATURE: Low-moderate randomness, favors consistent
    # structured output over creative variance
    GENERATION_TEMPERATURE: float = 0.5

    # MAX_UPLOAD_BYTES: Largest attachment accepted by POST /generate
    # - 20 MiB matches the inline-data request limit of the Gemini API
    MAX_UPLOAD_BYTES: int = 20 * 1024 * 1024


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from app.core.config import settings
settings = Settings()
