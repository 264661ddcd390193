# app/core/config.py
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Gemini (insights). GOOGLE_API_KEY is accepted as a fallback name.
    GEMINI_API_KEY: str = Field(
        "", validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY")
    )
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # Firebase Admin service account file
    FIREBASE_CREDENTIALS: str = "app/core/firebase_key.json"

    # Firestore collections
    HEALTH_DATA_COLLECTION: str = "health_data"
    USERS_COLLECTION: str = "users"

    # How many analyses the history endpoint returns by default
    HISTORY_LIMIT: int = 10

    AI_DEBUG_MODE: bool = False
    LOG_LEVEL: str = "INFO"

    # If you want to read from a .env file, keep this:
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
