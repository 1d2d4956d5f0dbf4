"""Mention domain service.

Mentions are ``@username`` tokens in free text. Extraction is split into a
pure scan and a lookup against the user repository, so the scan can be
reused without storage.
"""

import re

import logfire

from forum.domain.repository import UserRepository
from forum.domain.value import UserId, Username
from forum.domain.value.types import USERNAME_MAX_LENGTH

from .base import Service

MENTION_PATTERN = re.compile(r"@(\w+)", re.ASCII)


def find_mentioned_usernames(content: str) -> list[str]:
    """Return distinct mentioned usernames in order of first occurrence.

    Args:
        content: Free text to scan

    Returns:
        Usernames without the leading ``@``
    """
    return list(dict.fromkeys(MENTION_PATTERN.findall(content)))


class MentionService(Service):
    """Domain service resolving @mentions to user IDs."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize mention service.

        Args:
            user_repository: User repository used for username lookups
        """
        self.user_repository = user_repository

    async def resolve_mentions(self, content: str) -> list[UserId]:
        """Resolve the users mentioned in ``content``.

        Unknown usernames are ignored. IDs keep the order in which their
        usernames first appear.

        Args:
            content: Free text to scan

        Returns:
            IDs of mentioned users that exist
        """
        usernames = find_mentioned_usernames(content)
        if not usernames:
            return []

        with logfire.span("mention_service.resolve_mentions", count=len(usernames)):
            user_ids: list[UserId] = []
            for name in usernames:
                if len(name) > USERNAME_MAX_LENGTH:
                    continue
                user = await self.user_repository.find_by_username(Username(name))
                if user is None:
                    logfire.debug("Mentioned user does not exist", username=name)
                    continue
                if user.id not in user_ids:
                    user_ids.append(user.id)

            logfire.info(
                "Mentions resolved",
                mentioned=len(usernames),
                resolved=len(user_ids),
            )
            return user_ids
