"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from ask.domain.model.answer import Answer
from ask.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for the Answer aggregate (including its comments and votes).

    Concurrency contract:
    - ``update_if_version`` is the only way to change the versioned state
      (text, votes, voters, comments). It is a compare-and-swap: the write
      happens only if the stored version still equals ``expected_version``.
    - ``set_accepted`` is the only way to change ``is_accepted`` and is a
      single atomic statement over all answers of one question.
    Neither write touches the columns owned by the other.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, newest first.

        Args:
            question_id: The question ID

        Returns:
            Answers ordered by creation time, descending
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count answers for several questions with one aggregate query.

        Args:
            question_ids: Questions to count answers for

        Returns:
            Mapping of question ID to answer count (questions without
            answers may be absent)
        """
        pass

    @abstractmethod
    async def create(self, answer: Answer) -> Answer:
        """Insert a new answer.

        Args:
            answer: The answer to insert

        Returns:
            The inserted answer
        """
        pass

    @abstractmethod
    async def update_if_version(self, answer: Answer, expected_version: int) -> bool:
        """Write the versioned state of an answer if nobody changed it meanwhile.

        Args:
            answer: New state (its ``version`` is stored as the new version)
            expected_version: Version the caller read before computing ``answer``

        Returns:
            True if the row was updated, False if the version did not match
            or the answer no longer exists
        """
        pass

    @abstractmethod
    async def set_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Mark one answer accepted and all its siblings not accepted, atomically.

        Args:
            question_id: Question whose answers are updated
            answer_id: The answer to accept
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer together with its embedded comments.

        Args:
            answer_id: The answer ID

        Returns:
            True if an answer was deleted
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer of a question.

        Args:
            question_id: The question ID

        Returns:
            Number of answers deleted
        """
        pass
