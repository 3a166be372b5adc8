"""In-memory answer repository for testing."""

from collections import Counter
from typing import Optional, Sequence

from ask.domain.model.answer import Answer
from ask.domain.repository.answer import AnswerRepository
from ask.domain.value import AnswerId, QuestionId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing.

    Mirrors the Postgres column ownership: ``update_if_version`` keeps the
    stored ``is_accepted`` and ``set_accepted`` touches nothing else.
    """

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """All answers to a question, newest first."""
        answers = [
            a for a in reversed(list(self._answers.values())) if a.question_id == question_id
        ]
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Answer counts per question."""
        wanted = set(question_ids)
        return dict(
            Counter(a.question_id for a in self._answers.values() if a.question_id in wanted)
        )

    async def create(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        self._answers[answer.id] = answer
        return answer

    async def update_if_version(self, answer: Answer, expected_version: int) -> bool:
        """Replace the versioned state if the stored version matches."""
        stored = self._answers.get(answer.id)
        if stored is None or stored.version != expected_version:
            return False
        self._answers[answer.id] = answer.model_copy(
            update={"is_accepted": stored.is_accepted}
        )
        return True

    async def set_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Accept one answer and clear its siblings."""
        for stored in list(self._answers.values()):
            if stored.question_id == question_id:
                self._answers[stored.id] = stored.model_copy(
                    update={"is_accepted": stored.id == answer_id}
                )

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        return self._answers.pop(answer_id, None) is not None

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete all answers of a question."""
        doomed = [a.id for a in self._answers.values() if a.question_id == question_id]
        for answer_id in doomed:
            del self._answers[answer_id]
        return len(doomed)
