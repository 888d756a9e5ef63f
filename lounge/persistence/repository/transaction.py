"""PostgreSQL transaction boundary."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Runs a block inside a savepoint of the request session.

    The request-scoped session commits at the end of the request; row locks
    taken inside the block are held until then.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
