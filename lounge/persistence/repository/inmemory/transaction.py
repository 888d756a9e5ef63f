"""In-memory transaction boundary for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from lounge.domain.repository import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Serializes transaction blocks with a lock.

    Writes made before a failure inside the block are not undone.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self._lock:
            yield
