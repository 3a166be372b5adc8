"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary shared by the repositories of one request.

    The request scope commits automatically when it ends. Use cases commit
    explicitly when later work (notification dispatch) must run only after
    the primary write is durable, and must not be able to undo it.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit everything written so far."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard everything written since the last commit."""
        pass
