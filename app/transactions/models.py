"""Request and response models for the transactions API."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

# Strict so JSON booleans are rejected instead of coerced to 1 or 0
Amount = Union[StrictStr, StrictInt, StrictFloat]


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionCreate(CamelModel):
    """Body of POST /api/transactions.

    Every field is optional at parse time so that missing values are
    reported as one validation error by the service.
    """

    application_name: Optional[str] = None
    user_name: Optional[str] = None
    amount: Optional[Amount] = None
    device_token: Optional[str] = None


class Transaction(CamelModel):
    """A stored transaction. The id is the store key, not a field."""

    application_name: str
    user_name: str
    amount: Amount
    timestamp: str


class CreateTransactionResponse(BaseModel):
    """Response of POST /api/transactions."""

    id: str
    message: str
    transaction: Transaction


class ErrorResponse(BaseModel):
    error: str
