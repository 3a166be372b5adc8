"""Answer, comment and vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import AliasChoices, BaseModel, Field

from ask.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    GetAnswerRequest,
    GetAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from ask.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from ask.application.usecase.views import AnswerView, CommentView
from ask.application.usecase.vote import VoteAnswerRequest, VoteAnswerUseCase
from ask.domain.service import JWTService
from ask.interface.api.routes.common import require_user_id

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    question_id: str = Field(validation_alias=AliasChoices("question_id", "questionId"))
    text: str = Field(min_length=1, max_length=50000)


class UpdateAnswerAPIRequest(BaseModel):
    """API request for editing an answer."""

    text: str = Field(min_length=1, max_length=50000)


class CommentAPIRequest(BaseModel):
    """API request for commenting on an answer."""

    text: str = Field(min_length=1, max_length=5000)


class VoteAPIRequest(BaseModel):
    """API request for voting; ``type`` is "up" or "down"."""

    type: str


@router.post("", response_model=AnswerView, status_code=status.HTTP_201_CREATED)
async def create_answer(
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Answer a question. Notifies the asker and mentioned users."""
    user_id = require_user_id(jwt_service, auth_token)
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=request.question_id, text=request.text, author_id=user_id
        )
    )


@router.get("/single/{answer_id}", response_model=AnswerView)
async def get_answer(
    answer_id: str,
    get_answer_use_case: FromDishka[GetAnswerUseCase],
) -> AnswerView:
    """Get one answer with its comments."""
    return await get_answer_use_case.execute(GetAnswerRequest(answer_id=answer_id))


@router.get("/{question_id}", response_model=list[AnswerView])
async def list_answers(
    question_id: str,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
) -> list[AnswerView]:
    """All answers to a question, newest first."""
    return await list_answers_use_case.execute(
        ListAnswersRequest(question_id=question_id)
    )


@router.patch("/{answer_id}/vote", response_model=AnswerView)
async def vote_answer(
    answer_id: str,
    request: VoteAPIRequest,
    vote_answer_use_case: FromDishka[VoteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Vote an answer up or down, or switch an existing vote."""
    user_id = require_user_id(jwt_service, auth_token)
    return await vote_answer_use_case.execute(
        VoteAnswerRequest(answer_id=answer_id, user_id=user_id, type=request.type)
    )


@router.patch("/{answer_id}/accept", response_model=list[AnswerView])
async def accept_answer(
    answer_id: str,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> list[AnswerView]:
    """Accept an answer. Only the question's author may accept."""
    user_id = require_user_id(jwt_service, auth_token)
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(answer_id=answer_id, user_id=user_id)
    )


@router.patch("/{answer_id}", response_model=AnswerView)
async def update_answer(
    answer_id: str,
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Edit an answer's text. Only the author may edit."""
    user_id = require_user_id(jwt_service, auth_token)
    return await update_answer_use_case.execute(
        UpdateAnswerRequest(answer_id=answer_id, user_id=user_id, text=request.text)
    )


@router.delete("/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: str,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteAnswerResponse:
    """Delete an answer. Author or admin only."""
    user_id = require_user_id(jwt_service, auth_token)
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=answer_id, user_id=user_id)
    )


@router.post(
    "/{answer_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    answer_id: str,
    request: CommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentView:
    """Comment on an answer. Notifies the answer's author and mentioned users."""
    user_id = require_user_id(jwt_service, auth_token)
    return await add_comment_use_case.execute(
        AddCommentRequest(answer_id=answer_id, text=request.text, author_id=user_id)
    )


@router.delete("/{answer_id}/comments/{comment_id}", response_model=AnswerView)
async def delete_comment(
    answer_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Delete a comment. Comment author or admin only."""
    user_id = require_user_id(jwt_service, auth_token)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            answer_id=answer_id, comment_id=comment_id, user_id=user_id
        )
    )
