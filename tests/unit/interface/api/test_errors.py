"""Unit tests for the error to status mapping."""

import pytest

from ask.domain.error import (
    AuthenticationError,
    ConflictError,
    DuplicateVoteError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from ask.interface.api.errors import status_for


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ValidationError("Invalid vote type"), 400),
        (ConflictError("Username already taken"), 400),
        (DuplicateVoteError("a", "u"), 400),
        (AuthenticationError("Invalid credentials"), 401),
        (NotAuthorizedError("delete", "answer", "a", "u"), 403),
        (NotFoundError("Question", "q"), 404),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


def test_messages():
    assert str(NotFoundError("Question", "q")) == "Question not found"
    assert str(NotAuthorizedError("accept", "answer", "a", "u")) == (
        "Not authorized to accept this answer"
    )
