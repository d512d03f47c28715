# storefront/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Every value has a local-demo default, so no .env is required.

    Optional env vars (.env):
      - DATABASE_URL (defaults to a SQLite file next to the process)
      - SEED_ON_STARTUP (insert the demo catalog when products is empty)
      - CORS_ORIGINS (JSON list of allowed storefront origins)
      - LOG_LEVEL, HOST, PORT
    """

    PROJECT_NAME: str = "Storefront API"
    API_PREFIX: str = "/api"

    # Storage
    DATABASE_URL: str = "sqlite:///./ecommerce.db"
    DATABASE_ECHO: bool = False
    SEED_ON_STARTUP: bool = True

    # Storefront dev servers (CRA / Vite)
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
