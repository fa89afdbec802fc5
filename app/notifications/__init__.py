"""Push notifications about newly created transactions."""

from app.notifications.dispatcher import NotificationDispatcher
from app.notifications.models import NotificationRequest
from app.notifications.senders import (
    BaseNotificationSender,
    FCMNotificationSender,
    LoggingNotificationSender,
    NotificationError,
)

__all__ = [
    "NotificationDispatcher",
    "NotificationRequest",
    "BaseNotificationSender",
    "FCMNotificationSender",
    "LoggingNotificationSender",
    "NotificationError",
]
