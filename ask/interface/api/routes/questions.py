"""Question routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from ask.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from ask.application.usecase.views import QuestionView
from ask.domain.service import JWTService
from ask.interface.api.routes.common import require_user_id

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list, max_length=10)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question. Omitted fields are unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    description: Optional[str] = Field(default=None, min_length=1)
    tags: Optional[list[str]] = Field(default=None, max_length=10)


@router.get("", response_model=list[QuestionView])
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> list[QuestionView]:
    """List questions newest first with author and answer count."""
    return await list_questions_use_case.execute(
        ListQuestionsRequest(limit=limit, offset=offset)
    )


@router.post("", response_model=QuestionView, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Ask a question. Requires authentication."""
    user_id = require_user_id(jwt_service, auth_token)
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            author_id=user_id,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
    )


@router.get("/{question_id}", response_model=QuestionView)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> QuestionView:
    """Get one question with its author. Each call counts as a view."""
    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=question_id)
    )


@router.patch("/{question_id}", response_model=QuestionView)
async def update_question(
    question_id: str,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Edit a question. Only the author may edit."""
    user_id = require_user_id(jwt_service, auth_token)
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            question_id=question_id,
            user_id=user_id,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
    )


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: str,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question and all of its answers. Author or admin only."""
    user_id = require_user_id(jwt_service, auth_token)
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=question_id, user_id=user_id)
    )
