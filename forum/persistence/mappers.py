"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM. The reply tree travels as JSON.
"""

from typing import Any, Dict
from uuid import UUID

from forum.domain.model import Discussion, Reply, User
from forum.domain.value import (
    Approach,
    Category,
    DiscussionId,
    Tag,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_discussion(row: Dict[str, Any]) -> Discussion:
    """Convert database row to Discussion domain model.

    Args:
        row: Database row as dict; ``replies`` holds the JSON reply tree

    Returns:
        Discussion domain model with its full reply tree
    """
    return Discussion(
        id=DiscussionId(_uuid(row["id"])),
        question_id=row.get("question_id"),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        category=Category(row["category"]),
        approach=Approach(row["approach"]) if row.get("approach") else None,
        tags=[Tag(tag) for tag in row.get("tags") or []],
        likes=[UserId(_uuid(u)) for u in row.get("likes") or []],
        dislikes=[UserId(_uuid(u)) for u in row.get("dislikes") or []],
        mentions=[UserId(_uuid(u)) for u in row.get("mentions") or []],
        replies=[Reply.model_validate(r) for r in row.get("replies") or []],
        is_pinned=row.get("is_pinned", False),
        views=row.get("views", 0),
        version=row.get("version", 0),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def discussion_to_dict(discussion: Discussion) -> Dict[str, Any]:
    """Convert Discussion domain model to database dict.

    Enums become their string values and the reply tree becomes
    JSON-compatible data for the JSONB column.

    Args:
        discussion: Discussion domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = discussion.model_dump(exclude={"replies"})
    data["category"] = discussion.category.value
    data["approach"] = discussion.approach.value if discussion.approach else None
    data["replies"] = [reply.model_dump(mode="json") for reply in discussion.replies]
    return data
