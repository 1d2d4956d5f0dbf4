"""User entity.

Users are owned by the identity system. The forum only reads them to
attribute content and to resolve @mentions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId, Username


class User(DomainModel):
    """Forum user."""

    id: UserId
    username: Username
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
