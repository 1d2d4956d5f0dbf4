"""Provider base with component metadata.

A provider that names a ``__component__`` is a swappable seam: its
subclasses are the interchangeable implementations, told apart by
``__is_mock__``. Providers without a component are used as they are.
"""

from typing import ClassVar, Literal, get_args

from dishka import Provider

Component = Literal["persistence"]

COMPONENTS: frozenset[str] = frozenset(get_args(Component))


class ProviderBase(Provider):
    __component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, mock: bool = False) -> type["ProviderBase"]:
        """Pick the provider class to instantiate for this seam.

        Raises:
            LookupError: If no implementation of the requested kind is
                registered (mocks register by being imported)
        """
        if cls.__component__ is None:
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == mock:
                return impl

        kind = "mock" if mock else "production"
        raise LookupError(f"No {kind} provider registered for {cls.__component__}")
