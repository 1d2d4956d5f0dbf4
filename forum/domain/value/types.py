"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and small bits of business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject

TAG_MAX_LENGTH = 20
USERNAME_MAX_LENGTH = 50

_USERNAME_PATTERN = re.compile(r"\w+", re.ASCII)


class Category(str, Enum):
    """Discussion category."""

    QUESTIONS = "Questions"
    SOLUTIONS = "Solutions"
    GENERAL = "General"
    EXAMS = "Exams"
    STUDY = "Study"
    CAREER = "Career"
    FEEDBACK = "Feedback"
    OTHER = "Other"


class Approach(str, Enum):
    """How a solution tackles its question. Only Solutions carry one."""

    LOGIC = "Logic"
    STEPWISE = "Stepwise"
    FORMULA = "Formula"
    SHORTCUT = "Shortcut"
    OTHER = "Other"


class ReactionKind(str, Enum):
    """Per-user reaction on a discussion or reply."""

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def opposite(self) -> "ReactionKind":
        """The reaction this one displaces."""
        if self is ReactionKind.LIKE:
            return ReactionKind.DISLIKE
        return ReactionKind.LIKE


class Tag(RootValueObject[str]):
    """Free-form discussion tag.

    Surrounding whitespace is trimmed; the result must be 1-20 characters.
    Examples: 'algebra', 'mock test', 'jee-2025'
    """

    @field_validator("root")
    @classmethod
    def validate_tag(cls, v: str) -> str:
        """Trim and validate tag length."""
        v = v.strip()
        if len(v) < 1 or len(v) > TAG_MAX_LENGTH:
            raise ValueError(f"Tag must be 1-{TAG_MAX_LENGTH} characters")
        return v


class Username(RootValueObject[str]):
    """Username as referenced by @mentions.

    ASCII letters, digits and underscores only, 1-50 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if len(v) > USERNAME_MAX_LENGTH or not _USERNAME_PATTERN.fullmatch(v):
            raise ValueError(
                f"Username must be 1-{USERNAME_MAX_LENGTH} letters, digits or underscores"
            )
        return v
