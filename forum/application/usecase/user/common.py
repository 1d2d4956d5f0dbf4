"""Shared user response models."""

from pydantic import BaseModel

from forum.domain.model import User


class UserSummary(BaseModel):
    """Public view of a user, embedded wherever content is attributed."""

    user_id: str
    username: str
    avatar_url: str | None


def to_user_summary(user: User) -> UserSummary:
    return UserSummary(
        user_id=str(user.id),
        username=user.username.root,
        avatar_url=user.avatar_url,
    )
