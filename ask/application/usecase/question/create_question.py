"""Create question use case."""

from pydantic import BaseModel, Field

from ask.application.usecase.base import load_actor
from ask.application.usecase.views import QuestionView, question_view
from ask.domain.service import QuestionService, UserService


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    author_id: str  # User ID from authenticated user
    title: str
    description: str
    tags: list[str] = Field(default_factory=list)


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionView:
        """Create the question and return it with its author."""
        author = await load_actor(self.user_service, request.author_id)
        question = await self.question_service.create_question(
            author_id=author.id,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
        return question_view(question, {author.id: author}, answers_count=0)
