"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.error import ConflictError
from ask.domain.model import User
from ask.domain.repository import UserRepository
from ask.domain.value import Email, UserId, Username
from ask.persistence.mappers import row_to_user, user_to_dict
from ask.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        stmt = select(users_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users with one IN query."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username (case-sensitive)."""
        return await self._find_one(users_table.c.username == username.root)

    async def find_by_usernames(self, usernames: Sequence[str]) -> List[User]:
        """Find all users whose username is in the given list."""
        if not usernames:
            return []
        stmt = select(users_table).where(users_table.c.username.in_(list(usernames)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by (normalized) email."""
        return await self._find_one(users_table.c.email == email.root)

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            ConflictError: If a unique constraint on username or email fails
        """
        user_dict = user_to_dict(user)
        existing = await self.find_by_id(user.id)
        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        try:
            # Savepoint, so a lost uniqueness race leaves the session usable
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError("Username or email already registered") from e
        return user
