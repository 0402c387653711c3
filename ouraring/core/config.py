from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.ouraring.com/v1"


class Settings(BaseSettings):
    """Client settings loaded from OURA_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OURA_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    # Personal access token from the Oura cloud dashboard
    access_token: str

    # Optional settings
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0
    default_window_days: int = 7
    debug: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
