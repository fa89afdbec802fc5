from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    This uses pydantic-settings so that we get type validation and defaults.
    Firebase credential fields are all optional here; presence is checked
    separately at startup so that every missing key gets reported.
    """

    # App basics
    ENV: Literal["development", "staging", "production"] = "development"
    """Environment mode: affects logging and error handling."""

    DEBUG: bool = True
    """Enable debug mode: verbose logging and development features."""

    HOST: str = "0.0.0.0"
    """Interface the HTTP server binds to."""

    PORT: int = 3000
    """Port the HTTP server listens on."""

    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    """Origins allowed to call the API from a browser."""

    # Firebase service account
    FIREBASE_API_KEY: Optional[str] = None
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_PRIVATE_KEY_ID: Optional[str] = None

    FIREBASE_PRIVATE_KEY: Optional[str] = None
    """PEM private key, usually with line breaks encoded as literal '\\n'."""

    FIREBASE_CLIENT_EMAIL: Optional[str] = None
    FIREBASE_CLIENT_ID: Optional[str] = None

    FIREBASE_DATABASE_URL: Optional[str] = None
    """Realtime Database URL, e.g. https://<project>.firebaseio.com."""

    # Passed through to the credential as-is
    FIREBASE_AUTH_URI: Optional[str] = None
    FIREBASE_TOKEN_URI: Optional[str] = GOOGLE_TOKEN_URI
    """Google OAuth token endpoint; the Admin SDK refuses credentials without one."""
    FIREBASE_AUTH_PROVIDER_CERT_URL: Optional[str] = None
    FIREBASE_CLIENT_CERT_URL: Optional[str] = None
    FIREBASE_UNIVERSE_DOMAIN: Optional[str] = None

    # Storage
    STORE_BACKEND: Literal["firebase", "memory"] = "firebase"
    """'memory' keeps transactions in process and needs no credentials."""

    TRANSACTIONS_PATH: str = "transactions"
    """Database path of the transactions collection."""

    # Notifications
    NOTIFICATIONS_MODE: Literal["required", "optional", "disabled"] = "optional"
    """required: deviceToken is mandatory and always notified.
    optional: notify only when a deviceToken is sent.
    disabled: never notify."""

    NOTIFICATION_METHOD_LABEL: str = "transfer"
    """Payment method shown in notifications. Not taken from the request."""

    # Model config
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing .env repeatedly."""
    return Settings()
