"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables, with an optional .env file
as a fallback. This pattern keeps secrets out of source code — the .env file is
gitignored, and .env.example provides a safe template for developers.

Pydantic Settings automatically:
  1. Reads from environment variables (highest priority)
  2. Falls back to .env file values
  3. Uses defaults defined here (lowest priority)

Usage:
    from app.config import settings
    print(settings.SECRET_KEY)
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for the Developer Directory API.

    Required fields (no defaults) MUST be set in .env or environment:
      - SECRET_KEY: Used to sign JWT tokens
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # --- Application ---
    APP_NAME: str = "Developer Directory API"
    APP_VERSION: str = "0.2.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # --- Storage ---
    # "json" keeps each collection in a flat JSON file under DATA_DIR,
    # "sql" keeps each collection as one document row in DATABASE_URL,
    # "memory" is process-local and lost on restart (demos only).
    STORAGE_BACKEND: Literal["json", "sql", "memory"] = "json"
    DATA_DIR: str = "./data"
    USERS_FILE: str = "users.json"
    DEVELOPERS_FILE: str = "developers.json"
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/directory.db"

    # --- Authentication ---
    # REQUIRED: No default — forces the developer to set a real secret
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # --- Listing ---
    DEFAULT_PAGE_SIZE: int = 10

    # --- CORS ---
    # Origins allowed to make cross-origin requests (frontend URLs)
    ALLOWED_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]


# Singleton: import this instance everywhere instead of creating new Settings()
settings = Settings()
