"""Create answer use case."""

from pydantic import AliasChoices, BaseModel, Field

from ask.application.usecase.base import load_actor, parse_id
from ask.application.usecase.views import AnswerView, answer_view
from ask.domain.repository import UnitOfWork
from ask.domain.service import AnswerService, NotificationService, UserService
from ask.domain.value import QuestionId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str = Field(validation_alias=AliasChoices("question_id", "questionId"))
    text: str
    author_id: str  # User ID from authenticated user


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
            notification_service: Notification dispatcher
            unit_of_work: Transaction boundary
        """
        self.answer_service = answer_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateAnswerRequest) -> AnswerView:
        """Execute create answer flow.

        Steps:
        1. Create the answer (question must exist; it is loaded here, not re-read)
        2. Commit, so the answer survives whatever happens next
        3. Notify the asker and every mentioned user (best effort)

        Raises:
            ValidationError: If the question ID is malformed or text is blank
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(parse_id(request.question_id, "question"))
        author = await load_actor(self.user_service, request.author_id)

        answer, question = await self.answer_service.create_answer(
            question_id=question_id, author_id=author.id, text=request.text
        )
        await self.unit_of_work.commit()

        await self.notification_service.notify_answer_created(question, answer)

        return answer_view(answer, {author.id: author})
