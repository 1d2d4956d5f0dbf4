"""Container construction and FastAPI integration."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import build_providers


def create_container() -> AsyncContainer:
    """Build the production container from environment settings."""
    # FastapiProvider makes the current Request injectable
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app, replacing any attached before."""
    setup_dishka(container, app)
