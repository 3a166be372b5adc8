"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ask.domain.model.question import Question
from ask.domain.value import QuestionId


class QuestionRepository(ABC):
    """Repository for Question entity."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_for_share(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question and hold a shared lock on it until commit.

        Answers are inserted under this lock, so a concurrent delete either
        waits for the insert to commit or has already removed the question.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_for_update(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question and hold an exclusive lock on it until commit.

        Taken before deleting a question and its answers.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> List[Question]:
        """List questions, newest first.

        Args:
            limit: Maximum number of questions to return; None returns all
            offset: Number of questions to skip

        Returns:
            Questions ordered by creation time, descending
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment the view counter.

        Args:
            question_id: The question ID

        Returns:
            The updated question, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question (hard delete). Answers are not touched.

        Args:
            question_id: The question ID

        Returns:
            True if a question was deleted
        """
        pass
