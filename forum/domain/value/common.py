"""Base for single-value wrappers."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, read through ``.root``.

    Dumping yields the primitive, so wrapped values go into rows and JSON
    unchanged.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
