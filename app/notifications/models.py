"""Models for push notifications."""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import BaseModel

NOTIFICATION_TITLE = "New Transaction"


class NotificationRequest(BaseModel):
    """One notification about a freshly stored transaction. Never persisted."""

    token: str
    transaction_id: str
    amount: str
    method: str


def build_message_parts(request: NotificationRequest) -> Tuple[str, str, Dict[str, str]]:
    """Return (title, body, data) for a notification.

    Data payload values are strings because FCM only transports strings.
    """
    body = f"You received {request.amount} via {request.method}"
    data = {
        "transactionId": str(request.transaction_id),
        "amount": str(request.amount),
        "method": str(request.method),
    }
    return NOTIFICATION_TITLE, body, data
