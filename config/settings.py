from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class Settings(BaseSettings):
    """
    Application settings managed by Pydantic.
    Reads from environment variables and/or .env file.
    """
    # Project Info
    APP_NAME: str = "Greeting Service"
    ENVIRONMENT: str = "production"

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = Field(8080, ge=1, le=65535)

    # Externally visible base URL used for self links, e.g. behind a proxy.
    # When unset, links are derived from the incoming request.
    PUBLIC_BASE_URL: str | None = None

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = []

    # Config to read from .env file if available
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
        )


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings
