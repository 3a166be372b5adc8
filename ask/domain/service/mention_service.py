"""Mention scanner."""

import re

import logfire

from ask.domain.model import User
from ask.domain.repository import UserRepository

from .base import Service

MENTION_PATTERN = re.compile(r"@([A-Za-z0-9_]+)")


def extract_mentions(text: str) -> set[str]:
    """Return the distinct ``@handles`` in a piece of text.

    Matching is case-sensitive and the leading ``@`` is dropped.

    Example:
        >>> sorted(extract_mentions("hey @alice and @bob_2, see @alice"))
        ['alice', 'bob_2']
    """
    return set(MENTION_PATTERN.findall(text or ""))


class MentionService(Service):
    """Resolves ``@handles`` in answer and comment text to users."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize mention service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve_mentions(self, text: str) -> list[User]:
        """Find the users mentioned in a text with a single lookup.

        Handles that do not belong to a registered user are dropped.

        Args:
            text: Answer or comment text

        Returns:
            Mentioned users, each at most once
        """
        handles = extract_mentions(text)
        if not handles:
            return []
        with logfire.span("mention_service.resolve_mentions", handles=len(handles)):
            users = await self.user_repository.find_by_usernames(sorted(handles))
            logfire.info(
                "Mentions resolved", requested=len(handles), resolved=len(users)
            )
            return users
