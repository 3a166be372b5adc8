"""Delete comment use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor, parse_id
from ask.application.usecase.views import AnswerView, answer_views
from ask.domain.service import AnswerService, UserService
from ask.domain.value import AnswerId, CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    answer_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentUseCase:
    """Use case for removing a comment from an answer. Never notifies."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize delete comment use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> AnswerView:
        """Remove the comment and return the updated answer.

        Raises:
            NotFoundError: If the answer or comment does not exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        answer_id = AnswerId(parse_id(request.answer_id, "answer"))
        comment_id = CommentId(parse_id(request.comment_id, "comment"))
        requester = await load_actor(self.user_service, request.user_id)
        answer = await self.answer_service.delete_comment(answer_id, comment_id, requester)
        (view,) = await answer_views(self.user_service, [answer])
        return view
