"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from ask.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from ask.domain.repository import AnswerRepository, QuestionRepository
from ask.domain.service import AnswerService
from ask.domain.value import CommentId, QuestionId, UserRole
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _question(env):
    question_repo = await env.get(QuestionRepository)
    return await question_repo.save(make_question(uuid4()))


class TestCreateAnswer:
    """Tests for posting answers."""

    @pytest.mark.asyncio
    async def test_text_is_trimmed(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)

        answer, answered = await answer_service.create_answer(
            question.id, uuid4(), "  Use sorted().  "
        )

        assert answer.text == "Use sorted()."
        assert answered.id == question.id
        assert answer.votes == 0
        assert answer.is_accepted is False
        assert answer.comments == []

    @pytest.mark.asyncio
    async def test_blank_text_rejected(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)

        with pytest.raises(ValidationError):
            await answer_service.create_answer(question.id, uuid4(), "   ")

    @pytest.mark.asyncio
    async def test_unknown_question(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await answer_service.create_answer(QuestionId(uuid4()), uuid4(), "text")

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        first, _ = await answer_service.create_answer(question.id, uuid4(), "first")
        second, _ = await answer_service.create_answer(question.id, uuid4(), "second")

        answers = await answer_service.list_answers(question.id)

        assert [a.id for a in answers] == [second.id, first.id]


class TestEditAndDelete:
    """Tests for answer edits and deletes."""

    @pytest.mark.asyncio
    async def test_author_edit_keeps_votes_and_acceptance(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await _question(unit_env)
        author = make_user("bob")
        answer, _ = await answer_service.create_answer(question.id, author.id, "draft")
        await answer_repo.set_accepted(question.id, answer.id)

        updated = await answer_service.update_answer(answer.id, author, "final")

        stored = await answer_repo.find_by_id(answer.id)
        assert updated.text == "final"
        assert stored.text == "final"
        assert stored.is_accepted is True

    @pytest.mark.asyncio
    async def test_only_author_may_edit(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer, _ = await answer_service.create_answer(question.id, uuid4(), "draft")
        admin = make_user("admin", role=UserRole.ADMIN)

        with pytest.raises(NotAuthorizedError):
            await answer_service.update_answer(answer.id, admin, "rewritten")

    @pytest.mark.asyncio
    async def test_admin_may_delete(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer, _ = await answer_service.create_answer(question.id, uuid4(), "spam")

        await answer_service.delete_answer(answer.id, make_user("admin", role=UserRole.ADMIN))

        with pytest.raises(NotFoundError):
            await answer_service.get_answer(answer.id)

    @pytest.mark.asyncio
    async def test_stranger_may_not_delete(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer, _ = await answer_service.create_answer(question.id, uuid4(), "mine")

        with pytest.raises(NotAuthorizedError):
            await answer_service.delete_answer(answer.id, make_user("mallory"))


class TestComments:
    """Tests for embedded comments."""

    @pytest.mark.asyncio
    async def test_add_comment(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer, _ = await answer_service.create_answer(question.id, uuid4(), "answer")
        commenter = make_user("carol")

        updated, comment = await answer_service.add_comment(
            answer.id, commenter.id, " Thanks! "
        )

        assert comment.text == "Thanks!"
        assert [c.id for c in updated.comments] == [comment.id]
        assert updated.version == answer.version + 1

    @pytest.mark.asyncio
    async def test_blank_comment_rejected(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer, _ = await answer_service.create_answer(question.id, uuid4(), "answer")

        with pytest.raises(ValidationError, match="Comment text is required"):
            await answer_service.add_comment(answer.id, uuid4(), "")

    @pytest.mark.asyncio
    async def test_comment_author_deletes_comment(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer, _ = await answer_service.create_answer(question.id, uuid4(), "answer")
        commenter = make_user("carol")
        _, keep = await answer_service.add_comment(answer.id, uuid4(), "keep me")
        _, comment = await answer_service.add_comment(answer.id, commenter.id, "oops")

        updated = await answer_service.delete_comment(answer.id, comment.id, commenter)

        assert [c.id for c in updated.comments] == [keep.id]

    @pytest.mark.asyncio
    async def test_answer_author_cannot_delete_others_comment(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer_author = make_user("bob")
        answer, _ = await answer_service.create_answer(question.id, answer_author.id, "answer")
        _, comment = await answer_service.add_comment(answer.id, uuid4(), "critique")

        with pytest.raises(NotAuthorizedError):
            await answer_service.delete_comment(answer.id, comment.id, answer_author)

        assert len((await answer_service.get_answer(answer.id)).comments) == 1

    @pytest.mark.asyncio
    async def test_admin_deletes_any_comment(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer, _ = await answer_service.create_answer(question.id, uuid4(), "answer")
        _, comment = await answer_service.add_comment(answer.id, uuid4(), "rude")

        updated = await answer_service.delete_comment(
            answer.id, comment.id, make_user("admin", role=UserRole.ADMIN)
        )

        assert updated.comments == []

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _question(unit_env)
        answer, _ = await answer_service.create_answer(question.id, uuid4(), "answer")

        with pytest.raises(NotFoundError, match="Comment not found"):
            await answer_service.delete_comment(
                answer.id, CommentId(uuid4()), make_user("carol")
            )
