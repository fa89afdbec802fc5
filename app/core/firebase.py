"""Firebase Admin SDK initialization."""

from __future__ import annotations

import logging

import firebase_admin
from firebase_admin import credentials

from app.core.config import Settings
from app.core.credentials import (
    ConfigurationError,
    build_service_account,
    check_required_settings,
)

logger = logging.getLogger(__name__)


def initialize_firebase(settings: Settings) -> firebase_admin.App:
    """
    Initialize the Firebase app used by the store and the notifier.

    Args:
        settings: Application settings with the FIREBASE_* values

    Returns:
        The initialized Firebase app

    Raises:
        ConfigurationError: If the private key is empty or the SDK
            rejects the credential
    """
    check_required_settings(settings)
    service_account = build_service_account(settings)

    try:
        app = firebase_admin.initialize_app(
            credentials.Certificate(service_account),
            {"databaseURL": settings.FIREBASE_DATABASE_URL},
        )
    except Exception as e:
        raise ConfigurationError(f"Failed to initialize Firebase: {e}") from e

    logger.info("✓ Firebase initialized")
    return app
