"""Shared base for domain models."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model.

    Changes go through ``model_copy`` (trusted, unvalidated) or a fresh
    ``model_validate`` when invariants have to be rechecked.
    """

    model_config = ConfigDict(frozen=True)
