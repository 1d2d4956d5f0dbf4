"""Discussion domain service."""

from collections.abc import Callable
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from forum.config import DiscussionSettings
from forum.domain.error import (
    ConcurrentModificationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from forum.domain.model.discussion import Discussion, Reply, ReplyPath
from forum.domain.repository import DiscussionRepository, DiscussionSortOrder
from forum.domain.value import (
    Approach,
    Category,
    DiscussionId,
    ReactionKind,
    ReplyId,
    Tag,
    UserId,
)

from .base import Service
from .mention_service import MentionService


class DiscussionService(Service):
    """Domain service for discussions and their reply trees.

    Changes to an existing discussion are read-modify-write cycles: the
    aggregate is loaded, transformed into a new immutable aggregate, and
    written back only if nobody else wrote in between. On a version
    conflict the whole cycle is retried.
    """

    def __init__(
        self,
        discussion_repository: DiscussionRepository,
        mention_service: MentionService,
        settings: DiscussionSettings,
    ) -> None:
        """Initialize discussion service.

        Args:
            discussion_repository: Discussion repository
            mention_service: Mention service for @username resolution
            settings: Discussion settings (limits, retries)
        """
        self.discussion_repository = discussion_repository
        self.mention_service = mention_service
        self.settings = settings

    async def create_discussion(
        self,
        author_id: UserId,
        title: str,
        content: str,
        category: Category = Category.GENERAL,
        tags: Optional[list[str]] = None,
        approach: Optional[Approach] = None,
        question_id: Optional[int] = None,
    ) -> Discussion:
        """Create a discussion.

        The approach is kept only for Solutions, where it is mandatory. A
        question_id of 0 counts as no question (general forum).

        Raises:
            ValidationError: If a Solutions discussion has no approach
        """
        question_id = question_id or None
        with logfire.span(
            "discussion_service.create_discussion",
            author_id=str(author_id),
            category=category.value,
            question_id=question_id,
        ):
            if category == Category.SOLUTIONS:
                if approach is None:
                    logfire.warn("Solution without approach", author_id=str(author_id))
                    raise ValidationError("Approach is required for solutions")
            else:
                approach = None

            mentions = await self.mention_service.resolve_mentions(content)
            now = datetime.now()

            discussion = Discussion(
                id=DiscussionId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                title=title,
                content=content,
                category=category,
                approach=approach,
                tags=[Tag(tag) for tag in tags or []],
                mentions=mentions,
                created_at=now,
                updated_at=now,
            )

            saved = await self.discussion_repository.save(discussion)
            logfire.info(
                "Discussion created",
                discussion_id=str(saved.id),
                author_id=str(author_id),
                category=category.value,
                mentions=len(mentions),
            )
            return saved

    async def get_discussion(self, discussion_id: DiscussionId) -> Discussion:
        """Get a discussion by ID.

        Raises:
            NotFoundError: If the discussion does not exist
        """
        with logfire.span(
            "discussion_service.get_discussion", discussion_id=str(discussion_id)
        ):
            discussion = await self.discussion_repository.find_by_id(discussion_id)
            if discussion is None:
                logfire.warn("Discussion not found", discussion_id=str(discussion_id))
                raise NotFoundError("Discussion", str(discussion_id))
            return discussion

    async def list_discussions(
        self,
        sort: DiscussionSortOrder = DiscussionSortOrder.TRENDING,
        category: Optional[Category] = None,
        search: Optional[str] = None,
    ) -> list[Discussion]:
        """List general-forum discussions, capped at the configured limit."""
        search = search.strip() if search else None
        return await self.discussion_repository.find_all(
            sort=sort,
            category=category,
            search=search or None,
            limit=self.settings.list_limit,
        )

    async def get_question_discussions(
        self, question_id: int, solutions: bool = False
    ) -> list[Discussion]:
        """Get a question's discussions (or its solutions), newest first."""
        return await self.discussion_repository.find_by_question(
            question_id, solutions=solutions
        )

    async def count_question_discussions(self, question_id: int) -> int:
        """Count a question's non-solution discussions."""
        return await self.discussion_repository.count_by_question(question_id)

    async def add_reply(
        self,
        discussion_id: DiscussionId,
        content: str,
        author_id: UserId,
        parent_path: ReplyPath = (),
    ) -> Discussion:
        """Append a reply to the discussion or to any reply in its tree.

        Args:
            discussion_id: Discussion to reply in
            content: Reply text
            author_id: Replying user
            parent_path: Path of the reply being answered; empty for top level

        Returns:
            The updated discussion

        Raises:
            NotFoundError: If the discussion or parent reply does not exist
        """
        with logfire.span(
            "discussion_service.add_reply",
            discussion_id=str(discussion_id),
            author_id=str(author_id),
            depth=len(parent_path),
        ):
            mentions = await self.mention_service.resolve_mentions(content)
            now = datetime.now()
            reply = Reply(
                id=ReplyId(uuid4()),
                author_id=author_id,
                content=content,
                mentions=mentions,
                created_at=now,
                updated_at=now,
            )

            updated = await self._apply(
                discussion_id,
                "add_reply",
                lambda discussion: discussion.with_reply(reply, parent_path),
            )
            logfire.info(
                "Reply added",
                discussion_id=str(discussion_id),
                reply_id=str(reply.id),
                depth=len(parent_path),
            )
            return updated

    async def set_reaction(
        self,
        discussion_id: DiscussionId,
        path: ReplyPath,
        user_id: UserId,
        kind: ReactionKind,
    ) -> Discussion:
        """Toggle a like or dislike on the discussion or one of its replies.

        Raises:
            NotFoundError: If the discussion or addressed reply does not exist
        """
        with logfire.span(
            "discussion_service.set_reaction",
            discussion_id=str(discussion_id),
            user_id=str(user_id),
            kind=kind.value,
            depth=len(path),
        ):
            updated = await self._apply(
                discussion_id,
                "set_reaction",
                lambda discussion: discussion.with_reaction(
                    path, user_id, kind, datetime.now()
                ),
            )
            logfire.info(
                "Reaction toggled",
                discussion_id=str(discussion_id),
                kind=kind.value,
                reaction=_reaction_label(updated.resolve(path).reaction_of(user_id)),
            )
            return updated

    async def edit_discussion(
        self,
        discussion_id: DiscussionId,
        user_id: UserId,
        title: str,
        content: str,
        approach: Optional[Approach] = None,
    ) -> Discussion:
        """Edit a discussion's title, content and (for Solutions) approach.

        Raises:
            NotFoundError: If the discussion does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If a Solutions edit has no approach
        """
        with logfire.span(
            "discussion_service.edit_discussion",
            discussion_id=str(discussion_id),
            user_id=str(user_id),
        ):
            mentions: Optional[list[UserId]] = None
            if self.settings.refresh_mentions_on_edit:
                mentions = await self.mention_service.resolve_mentions(content)

            def edit(discussion: Discussion) -> Discussion:
                self._ensure_author(discussion, user_id, "edit")
                changes: dict = {"title": title, "content": content}
                if discussion.category == Category.SOLUTIONS:
                    if approach is None:
                        raise ValidationError("Approach is required for solutions")
                    changes["approach"] = approach
                if mentions is not None:
                    changes["mentions"] = mentions
                try:
                    return discussion.revised(**changes)
                except ValueError as e:
                    raise ValidationError(str(e)) from e

            updated = await self._apply(discussion_id, "edit_discussion", edit)
            logfire.info("Discussion edited", discussion_id=str(discussion_id))
            return updated

    async def delete_discussion(
        self, discussion_id: DiscussionId, user_id: UserId
    ) -> None:
        """Delete a discussion together with its reply tree.

        Raises:
            NotFoundError: If the discussion does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "discussion_service.delete_discussion",
            discussion_id=str(discussion_id),
            user_id=str(user_id),
        ):
            discussion = await self.get_discussion(discussion_id)
            self._ensure_author(discussion, user_id, "delete")

            if not await self.discussion_repository.delete(discussion_id):
                raise NotFoundError("Discussion", str(discussion_id))
            logfire.info(
                "Discussion deleted",
                discussion_id=str(discussion_id),
                replies=sum(1 for _ in discussion.iter_replies()),
            )

    async def increment_views(self, discussion_id: DiscussionId) -> int:
        """Count one more view of a discussion.

        Returns:
            The new view count

        Raises:
            NotFoundError: If the discussion does not exist
        """
        with logfire.span(
            "discussion_service.increment_views", discussion_id=str(discussion_id)
        ):
            views = await self.discussion_repository.increment_views(discussion_id)
            if views is None:
                logfire.warn(
                    "View on non-existent discussion",
                    discussion_id=str(discussion_id),
                )
                raise NotFoundError("Discussion", str(discussion_id))
            return views

    async def _apply(
        self,
        discussion_id: DiscussionId,
        operation: str,
        change: Callable[[Discussion], Discussion],
    ) -> Discussion:
        """Run a read-modify-write cycle, retrying on version conflicts.

        ``change`` must not have side effects; it may run more than once.
        """
        attempts = max(1, self.settings.max_write_retries)
        for attempt in range(1, attempts + 1):
            current = await self.get_discussion(discussion_id)
            changed = change(current).model_copy(update={"updated_at": datetime.now()})

            saved = await self.discussion_repository.update(
                changed, expected_version=current.version
            )
            if saved is not None:
                return saved

            logfire.warn(
                "Discussion write conflict",
                discussion_id=str(discussion_id),
                operation=operation,
                attempt=attempt,
            )

        logfire.error(
            "Discussion write retries exhausted",
            discussion_id=str(discussion_id),
            operation=operation,
            attempts=attempts,
        )
        raise ConcurrentModificationError("Discussion", str(discussion_id), attempts)

    @staticmethod
    def _ensure_author(discussion: Discussion, user_id: UserId, action: str) -> None:
        if discussion.author_id != user_id:
            logfire.warn(
                "Unauthorized discussion {action} attempt",
                action=action,
                discussion_id=str(discussion.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError(action, "discussion", str(discussion.id), str(user_id))


def _reaction_label(kind: ReactionKind | None) -> str:
    return kind.value if kind else "none"
