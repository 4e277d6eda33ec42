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
    APP_TITLE: str = "Greeting Service"
    ENVIRONMENT: str = "production"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Hypermedia links
    TRUST_FORWARDED_HEADERS: bool = False # enable only behind a proxy that sets these headers
    PUBLIC_BASE_URL: str | None = None # overrides request/proxy base when set

    # Greeting
    DEFAULT_NAME: str = "World"

    # Config to read from .env file if available
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
        )

settings = Settings()
