"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model import Question
from ask.domain.repository import QuestionRepository
from ask.domain.value import QuestionId
from ask.persistence.mappers import question_to_dict, row_to_question
from ask.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

    async def find_for_share(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question with SELECT ... FOR SHARE."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == question_id)
            .with_for_update(read=True)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

    async def find_for_update(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question with SELECT ... FOR UPDATE."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> List[Question]:
        """List questions newest first."""
        stmt = (
            select(questions_table)
            .order_by(desc(questions_table.c.created_at))
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_question(dict(row)) for row in result.mappings().all()]

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        question_dict = question_to_dict(question)
        existing = await self.find_by_id(question.id)
        if existing:
            # Views are only ever changed by increment_views
            question_dict.pop("views")
            stmt = (
                questions_table.update()
                .where(questions_table.c.id == question.id)
                .values(**question_dict)
            )
        else:
            stmt = questions_table.insert().values(**question_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment the view counter and return the new row."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
            .returning(questions_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_question(dict(row)) if row else None

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question row."""
        stmt = questions_table.delete().where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
