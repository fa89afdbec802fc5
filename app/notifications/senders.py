"""Senders delivering notifications to a push provider."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

import firebase_admin
from firebase_admin import messaging

from app.notifications.models import NotificationRequest, build_message_parts

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    """Raised when a notification could not be delivered."""

    pass


class BaseNotificationSender(ABC):
    """Base class for all notification senders."""

    @abstractmethod
    async def send(self, request: NotificationRequest) -> str:
        """
        Deliver one notification.

        Returns:
            Provider message id

        Raises:
            NotificationError: If the provider rejects or cannot be reached
        """
        pass


class FCMNotificationSender(BaseNotificationSender):
    """Sends notifications through Firebase Cloud Messaging."""

    def __init__(self, app: Optional[firebase_admin.App] = None):
        self.app = app

    def build_message(self, request: NotificationRequest) -> messaging.Message:
        title, body, data = build_message_parts(request)
        return messaging.Message(
            token=request.token,
            notification=messaging.Notification(title=title, body=body),
            data=data,
        )

    async def send(self, request: NotificationRequest) -> str:
        message = self.build_message(request)
        try:
            return await asyncio.to_thread(messaging.send, message, app=self.app)
        except Exception as e:
            raise NotificationError(str(e)) from e


class LoggingNotificationSender(BaseNotificationSender):
    """Writes notifications to the log instead of a push provider."""

    async def send(self, request: NotificationRequest) -> str:
        title, body, data = build_message_parts(request)
        logger.info(f"🔔 [no push provider] {title}: {body} {data}")
        return f"logged-{request.transaction_id}"
