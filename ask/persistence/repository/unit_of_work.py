"""SQLAlchemy unit of work."""

from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the request-scoped session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the session shared by the request's repositories.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def commit(self) -> None:
        """Commit the current transaction; the next statement opens a new one."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Roll back the current transaction."""
        await self.session.rollback()
