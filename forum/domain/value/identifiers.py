"""Strongly typed identifiers for forum domain entities.

Using NewType keeps discussion, reply and user IDs from being mixed up
while they all remain plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
DiscussionId = NewType("DiscussionId", UUID)
ReplyId = NewType("ReplyId", UUID)
