"""Simple dependency container for wiring core services."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.core.config import Settings
from app.core.firebase import initialize_firebase
from app.notifications.dispatcher import NotificationDispatcher
from app.notifications.senders import (
    BaseNotificationSender,
    FCMNotificationSender,
    LoggingNotificationSender,
)
from app.transactions.service import TransactionService
from app.transactions.store.base import BaseTransactionStore
from app.transactions.store.firebase_store import FirebaseTransactionStore
from app.transactions.store.memory_store import InMemoryTransactionStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    store: BaseTransactionStore
    dispatcher: NotificationDispatcher
    service: TransactionService


def wire_container(
    settings: Settings,
    store: BaseTransactionStore,
    sender: BaseNotificationSender,
) -> ApplicationContainer:
    """Assemble the service from an already built store and sender."""
    dispatcher = NotificationDispatcher(sender)
    service = TransactionService(
        store=store,
        dispatcher=dispatcher,
        notifications_mode=settings.NOTIFICATIONS_MODE,
        method_label=settings.NOTIFICATION_METHOD_LABEL,
    )
    return ApplicationContainer(
        settings=settings, store=store, dispatcher=dispatcher, service=service
    )


def build_container(settings: Settings) -> ApplicationContainer:
    """
    Build every long-lived collaborator for the configured backend.

    Raises:
        ConfigurationError: If Firebase cannot be initialized
    """
    if settings.STORE_BACKEND == "memory":
        logger.warning(
            "🔔 MEMORY STORE MODE: transactions are kept in process and "
            "notifications are only logged."
        )
        return wire_container(
            settings, InMemoryTransactionStore(), LoggingNotificationSender()
        )

    firebase_app = initialize_firebase(settings)
    store = FirebaseTransactionStore.from_app(settings.TRANSACTIONS_PATH, firebase_app)
    return wire_container(settings, store, FCMNotificationSender(firebase_app))


__all__ = ["ApplicationContainer", "build_container", "wire_container"]
