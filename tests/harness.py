"""Fixture factory giving each test its own container.

Each test module binds a fixture at import time:

    unit_env = create_env_fixture()
    integration_env = create_env_fixture(unmock={"persistence"})

and resolves what it needs from the request scope:

    async def test_reply(unit_env):
        service = await unit_env.get(DiscussionService)

Integration fixtures need a migrated PostgreSQL at DATABASE__URL.
"""

import pytest_asyncio

from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    @pytest_asyncio.fixture
    async def _environment():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _environment
