"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups several repository calls into one atomic unit of work.

    Conflicting transactions are serialized by the store; a failure inside
    the block rolls back every write made within it.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block.

        Usage:
            async with transaction_manager.transaction():
                ...
        """
        pass
