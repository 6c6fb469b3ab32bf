"""
Unit of Work contract.
"""

from abc import ABC, abstractmethod


class IUnitOfWork(ABC):
    """
    Batches pending repository mutations and commits them atomically.

    Usable as an async context manager; leaving the block with an exception
    rolls back whatever was not committed:

        async with uow:
            await repo.add(order)
            affected = await uow.commit()
    """

    @abstractmethod
    async def commit(self) -> int:
        """
        Persist all pending changes.

        Returns:
            Number of affected records
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending changes."""
        pass

    async def __aenter__(self) -> "IUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            await self.rollback()
