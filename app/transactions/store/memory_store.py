"""
In-memory transaction store for development and tests.

Generates keys in the same shape as Firebase push ids so clients see the
same ordering behaviour without a real database.
"""

import asyncio
import copy
import random
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from app.transactions.store.base import (
    BaseTransactionStore,
    StorageReadError,
    StorageWriteError,
)

# Ordered by ASCII value so lexicographic order matches creation order
PUSH_CHARS = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"


class PushIdGenerator:
    """
    Generates 20-character, chronologically sortable ids.

    The first 8 characters encode the millisecond timestamp and the last
    12 are random. Ids created within the same millisecond (or while the
    clock runs backwards) reuse the previous random part incremented by one.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last_push_time = 0
        self._last_rand_chars: List[int] = [0] * 12

    def __call__(self) -> str:
        now = int(self._clock() * 1000)
        duplicate = now <= self._last_push_time
        if duplicate:
            now = self._last_push_time
            self._increment_random()
        else:
            self._last_rand_chars = [random.randrange(64) for _ in range(12)]
        self._last_push_time = now

        timestamp_chars = []
        for _ in range(8):
            timestamp_chars.append(PUSH_CHARS[now % 64])
            now //= 64
        timestamp_chars.reverse()

        return "".join(timestamp_chars) + "".join(
            PUSH_CHARS[i] for i in self._last_rand_chars
        )

    def _increment_random(self) -> None:
        i = 11
        while i >= 0 and self._last_rand_chars[i] == 63:
            self._last_rand_chars[i] = 0
            i -= 1
        if i < 0:
            raise OverflowError("Push id space exhausted for this millisecond")
        self._last_rand_chars[i] += 1


class InMemoryTransactionStore(BaseTransactionStore):
    """Dict-backed store with optional simulated failures and latency."""

    def __init__(
        self,
        failure_rate: float = 0.0,
        latency_ms: int = 0,
        id_generator: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize the store.

        Args:
            failure_rate: Probability of simulated failure (0.0 to 1.0)
            latency_ms: Simulated round-trip latency in milliseconds
            id_generator: Key factory, push ids by default
        """
        self.failure_rate = failure_rate
        self.latency_ms = latency_ms
        self._generate_id = id_generator or PushIdGenerator()
        self._records: Dict[str, Dict[str, Any]] = {}

    def get_backend_name(self) -> str:
        return "memory"

    def __len__(self) -> int:
        return len(self._records)

    async def list_all(self) -> Dict[str, Dict[str, Any]]:
        await self._simulate_latency()
        if random.random() < self.failure_rate:
            raise StorageReadError("Simulated store read failure")
        return copy.deepcopy(self._records)

    async def append(self, record: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
        await self._simulate_latency()
        if random.random() < self.failure_rate:
            raise StorageWriteError("Simulated store write failure")

        key = self._generate_id()
        self._records[key] = copy.deepcopy(record)
        return key, record

    async def _simulate_latency(self) -> None:
        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000)
