"""In-memory question repository for testing."""

from typing import Optional

from ask.domain.model.question import Question
from ask.domain.repository.question import QuestionRepository
from ask.domain.value import QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_for_share(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question; there are no locks in memory."""
        return self._questions.get(question_id)

    async def find_for_update(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question; there are no locks in memory."""
        return self._questions.get(question_id)

    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[Question]:
        """List questions newest first."""
        # Newest first; ties go to the most recently inserted
        questions = sorted(
            reversed(list(self._questions.values())),
            key=lambda q: q.created_at,
            reverse=True,
        )
        end = None if limit is None else offset + limit
        return questions[offset:end]

    async def save(self, question: Question) -> Question:
        """Save a question; the stored view count is kept on update."""
        existing = self._questions.get(question.id)
        if existing:
            question = question.model_copy(update={"views": existing.views})
        self._questions[question.id] = question
        return question

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Increment the view counter."""
        question = self._questions.get(question_id)
        if not question:
            return None
        question = question.model_copy(update={"views": question.views + 1})
        self._questions[question_id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question."""
        return self._questions.pop(question_id, None) is not None
