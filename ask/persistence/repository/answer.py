"""PostgreSQL implementation of Answer repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model import Answer
from ask.domain.repository import AnswerRepository
from ask.domain.value import AnswerId, QuestionId
from ask.persistence.mappers import answer_to_dict, row_to_answer
from ask.persistence.tables import answers_table

# Columns written by the version-checked update. is_accepted is deliberately
# absent: it is owned by set_accepted.
VERSIONED_COLUMNS = ("text", "votes", "voters", "comments", "updated_at", "version")


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """All answers to a question, newest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(desc(answers_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Answer counts per question from one GROUP BY query."""
        if not question_ids:
            return {}
        stmt = (
            select(answers_table.c.question_id, func.count().label("count"))
            .where(answers_table.c.question_id.in_(list(question_ids)))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {QuestionId(row.question_id): row.count for row in result.fetchall()}

    async def create(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        stmt = answers_table.insert().values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def update_if_version(self, answer: Answer, expected_version: int) -> bool:
        """Compare-and-swap the versioned columns of an answer."""
        answer_dict = answer_to_dict(answer)
        stmt = (
            answers_table.update()
            .where(answers_table.c.id == answer.id)
            .where(answers_table.c.version == expected_version)
            .values(**{column: answer_dict[column] for column in VERSIONED_COLUMNS})
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def set_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Accept one answer and clear its siblings in a single UPDATE."""
        stmt = (
            answers_table.update()
            .where(answers_table.c.question_id == question_id)
            .values(is_accepted=(answers_table.c.id == answer_id))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer row (its comments are embedded)."""
        stmt = answers_table.delete().where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete all answers of a question."""
        stmt = answers_table.delete().where(answers_table.c.question_id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
