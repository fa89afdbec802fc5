"""
Transactions API routes.

Lists stored transactions and records new ones. Errors are returned as
`{"error": <message>}` bodies.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.transactions.models import (
    CreateTransactionResponse,
    ErrorResponse,
    TransactionCreate,
)
from app.transactions.service import TransactionService, TransactionValidationError
from app.transactions.store.base import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


def get_transaction_service(request: Request) -> TransactionService:
    """Return the service built at startup."""
    return request.app.state.container.service


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "",
    responses={500: {"model": ErrorResponse}},
)
async def list_transactions(
    service: TransactionService = Depends(get_transaction_service),
):
    """Return every stored transaction keyed by id, `{}` when there are none."""
    try:
        transactions = await service.list_transactions()
    except StorageReadError as e:
        logger.error(f"Error fetching transactions: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e) or "Error fetching transactions")

    return JSONResponse(status_code=status.HTTP_200_OK, content=transactions)


@router.post(
    "",
    response_model=CreateTransactionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_transaction(
    payload: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Record a transaction.

    The timestamp is set by the server. When a deviceToken is sent and
    notifications are enabled, a push notification follows the write;
    its outcome never changes this response.
    """
    try:
        return await service.create_transaction(payload)
    except TransactionValidationError as e:
        logger.warning(f"Rejected transaction: {e}")
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except StorageWriteError as e:
        logger.error(f"Error saving transaction: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e) or "Error saving transaction")
