"""Best-effort notification dispatch."""

from __future__ import annotations

import logging

from app.notifications.models import NotificationRequest
from app.notifications.senders import BaseNotificationSender

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    Sends a single notification per transaction and never raises.

    By the time this runs the transaction is already stored, so a
    delivery failure is logged and otherwise ignored. There is no retry.
    """

    def __init__(self, sender: BaseNotificationSender):
        self.sender = sender

    async def notify(
        self, token: str, transaction_id: str, amount: str, method: str
    ) -> None:
        try:
            request = NotificationRequest(
                token=token,
                transaction_id=str(transaction_id),
                amount=str(amount),
                method=method,
            )
            message_id = await self.sender.send(request)
        except Exception as e:
            logger.error(
                f"Notification for transaction {transaction_id} failed: {e}",
                exc_info=True,
            )
            return

        logger.info(f"✓ Notification {message_id} sent for transaction {transaction_id}")
