"""Test DI wiring.

The mock providers must be imported before a container is built so they
are registered as implementations of their component.
"""

from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = ["MockPersistenceProvider", "build_test_container"]
