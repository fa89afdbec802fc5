"""
Firebase service account assembly.

Builds the credential dictionary expected by the Admin SDK out of the
individual FIREBASE_* settings and reports which of them are missing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from app.core.config import GOOGLE_TOKEN_URI, Settings

logger = logging.getLogger(__name__)

REQUIRED_SETTINGS = (
    "FIREBASE_API_KEY",
    "FIREBASE_PROJECT_ID",
    "FIREBASE_PRIVATE_KEY_ID",
    "FIREBASE_PRIVATE_KEY",
    "FIREBASE_CLIENT_EMAIL",
    "FIREBASE_CLIENT_ID",
    "FIREBASE_DATABASE_URL",
)


class ConfigurationError(Exception):
    """Raised when the service cannot start with the current configuration."""

    pass


def check_required_settings(settings: Settings) -> List[str]:
    """
    Log the presence of every required setting.

    Missing values are only warned about here; the caller decides
    which of them are fatal.

    Returns:
        Names of the missing settings, in declaration order
    """
    missing = []
    for name in REQUIRED_SETTINGS:
        if getattr(settings, name, None):
            logger.info(f"✓ {name} loaded")
        else:
            logger.warning(f"⚠ Missing environment variable: {name}")
            missing.append(name)
    return missing


def decode_private_key(raw: str | None) -> str:
    """Turn literal '\\n' sequences into real line breaks."""
    if not raw:
        return ""
    return raw.replace("\\n", "\n")


def build_service_account(settings: Settings) -> Dict[str, Any]:
    """
    Assemble the service account credential.

    Raises:
        ConfigurationError: If the private key is missing or empty
    """
    private_key = decode_private_key(settings.FIREBASE_PRIVATE_KEY)
    if not private_key.strip():
        raise ConfigurationError("Firebase private key is missing or malformed")

    account = {
        "type": "service_account",
        "project_id": settings.FIREBASE_PROJECT_ID,
        "private_key_id": settings.FIREBASE_PRIVATE_KEY_ID,
        "private_key": private_key,
        "client_email": settings.FIREBASE_CLIENT_EMAIL,
        "client_id": settings.FIREBASE_CLIENT_ID,
        "auth_uri": settings.FIREBASE_AUTH_URI,
        "token_uri": settings.FIREBASE_TOKEN_URI or GOOGLE_TOKEN_URI,
        "auth_provider_x509_cert_url": settings.FIREBASE_AUTH_PROVIDER_CERT_URL,
        "client_x509_cert_url": settings.FIREBASE_CLIENT_CERT_URL,
        "universe_domain": settings.FIREBASE_UNIVERSE_DOMAIN,
    }
    # Unset optional fields are left out rather than sent as null
    return {key: value for key, value in account.items() if value is not None}
