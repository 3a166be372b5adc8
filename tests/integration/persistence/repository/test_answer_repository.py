"""Integration tests for the Postgres repositories.

Require a migrated database at DATABASE__URL; enable with RUN_INTEGRATION=1.
"""

import asyncio
import os
from uuid import uuid4

import pytest
import pytest_asyncio

from ask.domain.error import ConflictError, NotFoundError
from ask.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UnitOfWork,
    UserRepository,
)
from ask.domain.service import AnswerService, QuestionService
from ask.domain.value import VoteDirection
from tests.conftest import make_answer, make_question, make_user
from tests.di import build_test_container
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("RUN_INTEGRATION"), reason="set RUN_INTEGRATION=1 to run"
)

integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def integration_container():
    """App container; each ``container()`` scope gets its own session."""
    container = build_test_container(unmock={"persistence"})
    yield container
    await container.close()


def _unique(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


class TestAnswerRepositoryIntegration:
    """Versioned writes and acceptance against Postgres."""

    @pytest.mark.asyncio
    async def test_update_if_version_rejects_stale_writes(self, integration_env):
        # Arrange
        answer_repo = await integration_env.get(AnswerRepository)
        answer = await answer_repo.create(make_answer(uuid4(), uuid4()))
        voter = uuid4()
        voted = answer.model_copy(
            update={"votes": 1, "voters": {voter: VoteDirection.UP}, "version": 1}
        )

        # Act
        first = await answer_repo.update_if_version(voted, expected_version=0)
        stale = await answer_repo.update_if_version(
            voted.model_copy(update={"votes": 99, "version": 1}), expected_version=0
        )

        # Assert
        assert first is True
        assert stale is False
        stored = await answer_repo.find_by_id(answer.id)
        assert stored.votes == 1
        assert stored.voters == {voter: VoteDirection.UP}
        assert stored.version == 1

    @pytest.mark.asyncio
    async def test_set_accepted_clears_siblings(self, integration_env):
        answer_repo = await integration_env.get(AnswerRepository)
        question_id = uuid4()
        answers = [
            await answer_repo.create(make_answer(question_id, uuid4(), age_seconds=i))
            for i in range(3)
        ]

        await answer_repo.set_accepted(question_id, answers[0].id)
        await answer_repo.set_accepted(question_id, answers[2].id)

        stored = await answer_repo.find_by_question(question_id)
        assert [a.id for a in stored if a.is_accepted] == [answers[2].id]

    @pytest.mark.asyncio
    async def test_counts_and_cascade(self, integration_env):
        answer_repo = await integration_env.get(AnswerRepository)
        question_repo = await integration_env.get(QuestionRepository)
        question = await question_repo.save(make_question(uuid4()))
        for _ in range(2):
            await answer_repo.create(make_answer(question.id, uuid4()))

        counts = await answer_repo.count_by_questions([question.id])
        removed = await answer_repo.delete_by_question(question.id)

        assert counts == {question.id: 2}
        assert removed == 2
        assert await answer_repo.find_by_question(question.id) == []

    @pytest.mark.asyncio
    async def test_increment_views(self, integration_env):
        question_repo = await integration_env.get(QuestionRepository)
        question = await question_repo.save(make_question(uuid4()))

        await question_repo.increment_views(question.id)
        viewed = await question_repo.increment_views(question.id)

        assert viewed.views == 2



class TestAnswerDeleteRace:
    """Answer inserts and question deletes serialize on the question row."""

    @pytest.mark.asyncio
    async def test_insert_waits_for_delete_and_then_fails(self, integration_container):
        # Arrange
        async with integration_container() as setup:
            question_repo = await setup.get(QuestionRepository)
            question = await question_repo.save(make_question(uuid4()))

        async with integration_container() as deleter, integration_container() as answerer:
            question_repo = await deleter.get(QuestionRepository)
            answer_repo = await deleter.get(AnswerRepository)
            unit_of_work = await deleter.get(UnitOfWork)
            answer_service = await answerer.get(AnswerService)

            assert await question_repo.find_for_update(question.id)

            # Act
            insert = asyncio.create_task(
                answer_service.create_answer(question.id, uuid4(), "Too late")
            )
            await asyncio.sleep(0.3)
            blocked = not insert.done()
            await answer_repo.delete_by_question(question.id)
            await question_repo.delete(question.id)
            await unit_of_work.commit()

            # Assert
            assert blocked
            with pytest.raises(NotFoundError):
                await asyncio.wait_for(insert, timeout=5)

        async with integration_container() as check:
            answer_repo = await check.get(AnswerRepository)
            assert await answer_repo.find_by_question(question.id) == []

    @pytest.mark.asyncio
    async def test_delete_waits_for_insert_and_removes_it(self, integration_container):
        author = make_user(_unique("asker"))
        async with integration_container() as setup:
            question_repo = await setup.get(QuestionRepository)
            question = await question_repo.save(make_question(author.id))

        async with integration_container() as answerer, integration_container() as deleter:
            answer_service = await answerer.get(AnswerService)
            unit_of_work = await answerer.get(UnitOfWork)
            question_service = await deleter.get(QuestionService)

            await answer_service.create_answer(question.id, uuid4(), "Just in time")
            delete = asyncio.create_task(
                question_service.delete_question(question.id, author)
            )
            await asyncio.sleep(0.3)
            blocked = not delete.done()
            await unit_of_work.commit()

            removed = await asyncio.wait_for(delete, timeout=5)

            assert blocked
            assert removed == 1

        async with integration_container() as check:
            answer_repo = await check.get(AnswerRepository)
            assert await answer_repo.find_by_question(question.id) == []

class TestUserRepositoryIntegration:
    """Uniqueness constraints on users."""

    @pytest.mark.asyncio
    async def test_duplicate_username_is_conflict(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        username = _unique("u")
        await user_repo.save(make_user(username))
        clash = make_user(username).model_copy(
            update={"email": make_user(_unique("e")).email}
        )

        with pytest.raises(ConflictError):
            await user_repo.save(clash)

    @pytest.mark.asyncio
    async def test_find_by_usernames(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        alice = await user_repo.save(make_user(_unique("alice")))

        found = await user_repo.find_by_usernames([alice.username.root, _unique("ghost")])

        assert [u.id for u in found] == [alice.id]
