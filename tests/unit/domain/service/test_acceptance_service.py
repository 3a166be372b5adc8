"""Unit tests for answer acceptance."""

from uuid import uuid4

import pytest

from ask.domain.error import NotAuthorizedError, NotFoundError
from ask.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from ask.domain.service import AcceptanceService, VoteService
from ask.domain.value import AnswerId
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(env, answers: int = 3):
    user_repo = await env.get(UserRepository)
    question_repo = await env.get(QuestionRepository)
    answer_repo = await env.get(AnswerRepository)

    asker = await user_repo.save(make_user("asker"))
    helper = await user_repo.save(make_user("helper"))
    question = await question_repo.save(make_question(asker.id))
    created = [
        await answer_repo.create(
            make_answer(question.id, helper.id, text=f"answer {i}", age_seconds=10 - i)
        )
        for i in range(answers)
    ]
    return asker, helper, question, created


class TestAcceptAnswer:
    """Tests for AcceptanceService.accept_answer."""

    @pytest.mark.asyncio
    async def test_asker_accepts_one_answer(self, unit_env):
        # Arrange
        acceptance = await unit_env.get(AcceptanceService)
        asker, _, _, answers = await _seed(unit_env)

        # Act
        result = await acceptance.accept_answer(answers[1].id, asker.id)

        # Assert
        accepted = [a.id for a in result if a.is_accepted]
        assert accepted == [answers[1].id]
        assert len(result) == 3

    @pytest.mark.asyncio
    async def test_accepting_another_answer_moves_the_mark(self, unit_env):
        acceptance = await unit_env.get(AcceptanceService)
        asker, _, _, answers = await _seed(unit_env)

        await acceptance.accept_answer(answers[0].id, asker.id)
        result = await acceptance.accept_answer(answers[2].id, asker.id)

        assert [a.id for a in result if a.is_accepted] == [answers[2].id]

    @pytest.mark.asyncio
    async def test_accepting_twice_is_idempotent(self, unit_env):
        acceptance = await unit_env.get(AcceptanceService)
        asker, _, _, answers = await _seed(unit_env)

        await acceptance.accept_answer(answers[0].id, asker.id)
        result = await acceptance.accept_answer(answers[0].id, asker.id)

        assert [a.id for a in result if a.is_accepted] == [answers[0].id]

    @pytest.mark.asyncio
    async def test_result_is_newest_first(self, unit_env):
        acceptance = await unit_env.get(AcceptanceService)
        asker, _, _, answers = await _seed(unit_env)

        result = await acceptance.accept_answer(answers[0].id, asker.id)

        assert [a.id for a in result] == [a.id for a in reversed(answers)]

    @pytest.mark.asyncio
    async def test_only_the_asker_may_accept(self, unit_env):
        acceptance = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        _, helper, _, answers = await _seed(unit_env)

        with pytest.raises(NotAuthorizedError):
            await acceptance.accept_answer(answers[0].id, helper.id)

        stored = await answer_repo.find_by_id(answers[0].id)
        assert stored.is_accepted is False

    @pytest.mark.asyncio
    async def test_unknown_answer(self, unit_env):
        acceptance = await unit_env.get(AcceptanceService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await acceptance.accept_answer(AnswerId(uuid4()), uuid4())

    @pytest.mark.asyncio
    async def test_acceptance_survives_later_votes(self, unit_env):
        acceptance = await unit_env.get(AcceptanceService)
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, helper, _, answers = await _seed(unit_env, answers=1)

        await acceptance.accept_answer(answers[0].id, asker.id)
        await vote_service.apply_vote(answers[0].id, asker.id, "up")

        stored = await answer_repo.find_by_id(answers[0].id)
        assert stored.is_accepted is True
        assert stored.votes == 1
