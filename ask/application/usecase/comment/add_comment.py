"""Add comment use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor, parse_id
from ask.application.usecase.views import CommentView, comment_view
from ask.domain.repository import UnitOfWork
from ask.domain.service import AnswerService, NotificationService, UserService
from ask.domain.value import AnswerId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    answer_id: str
    text: str
    author_id: str  # User ID from authenticated user


class AddCommentUseCase:
    """Use case for commenting on an answer."""

    def __init__(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize add comment use case.

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

    async def execute(self, request: AddCommentRequest) -> CommentView:
        """Execute add comment flow.

        Steps:
        1. Append the comment to the answer (version-checked write)
        2. Commit
        3. Notify the answer's author and every mentioned user (best effort)

        Returns:
            The new comment with its author

        Raises:
            ValidationError: If the answer ID is malformed or text is blank
            NotFoundError: If the answer does not exist
        """
        answer_id = AnswerId(parse_id(request.answer_id, "answer"))
        author = await load_actor(self.user_service, request.author_id)

        answer, comment = await self.answer_service.add_comment(
            answer_id, author.id, request.text
        )
        await self.unit_of_work.commit()

        await self.notification_service.notify_comment_created(answer, comment)

        return comment_view(comment, {author.id: author})
