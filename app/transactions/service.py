"""
Transaction ingestion workflow.

Validates incoming transactions, stamps them with the server time,
appends them to the store and hands them to the notification dispatcher
when the configured notification mode calls for it.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional

from app.notifications.dispatcher import NotificationDispatcher
from app.transactions.models import (
    CreateTransactionResponse,
    Transaction,
    TransactionCreate,
)
from app.transactions.store.base import BaseTransactionStore

logger = logging.getLogger(__name__)

NotificationsMode = Literal["required", "optional", "disabled"]

MISSING_FIELDS_MESSAGE = "missing required fields"
CREATED_MESSAGE = "Transaction saved successfully"


class TransactionValidationError(Exception):
    """Raised when a create request lacks required fields."""

    pass


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-05-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    # Zero amounts are rejected like other empty values
    return value == 0


class TransactionService:
    """Lists and creates transactions against one store."""

    def __init__(
        self,
        store: BaseTransactionStore,
        dispatcher: Optional[NotificationDispatcher] = None,
        notifications_mode: NotificationsMode = "optional",
        method_label: str = "transfer",
    ):
        if notifications_mode != "disabled" and dispatcher is None:
            raise ValueError(
                f"A dispatcher is needed when notifications are {notifications_mode}"
            )
        self.store = store
        self.dispatcher = dispatcher
        self.notifications_mode = notifications_mode
        self.method_label = method_label

    async def list_transactions(self) -> Dict[str, Dict[str, Any]]:
        return await self.store.list_all()

    def validate(self, payload: TransactionCreate) -> None:
        """
        Check that every required field is present and non-empty.

        Raises:
            TransactionValidationError: If any required field is missing
        """
        required = [payload.application_name, payload.user_name, payload.amount]
        if self.notifications_mode == "required":
            required.append(payload.device_token)

        if any(_is_blank(value) for value in required):
            raise TransactionValidationError(MISSING_FIELDS_MESSAGE)

    async def create_transaction(
        self, payload: TransactionCreate
    ) -> CreateTransactionResponse:
        """
        Store a new transaction and notify its device token if needed.

        Raises:
            TransactionValidationError: If required fields are missing
            StorageWriteError: If the store rejects the write
        """
        self.validate(payload)

        transaction = Transaction(
            application_name=payload.application_name,
            user_name=payload.user_name,
            amount=payload.amount,
            timestamp=utc_timestamp(),
        )
        transaction_id, _ = await self.store.append(
            transaction.model_dump(by_alias=True)
        )
        logger.info(
            f"✓ Transaction {transaction_id} stored "
            f"({transaction.application_name}, {transaction.user_name})"
        )

        if self._should_notify(payload.device_token):
            await self.dispatcher.notify(
                token=payload.device_token,
                transaction_id=transaction_id,
                amount=str(transaction.amount),
                method=self.method_label,
            )

        return CreateTransactionResponse(
            id=transaction_id, message=CREATED_MESSAGE, transaction=transaction
        )

    def _should_notify(self, device_token: Optional[str]) -> bool:
        if self.notifications_mode == "disabled":
            return False
        return not _is_blank(device_token)
