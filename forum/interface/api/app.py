"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.routes import discussions, health
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi

# Local frontend dev server, allowed in every environment
_DEV_ORIGIN = "http://localhost:3000"


def _add_cors(app: FastAPI, settings: Settings) -> None:
    # Credentials are needed so the browser sends the auth_token cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted({settings.frontend_url, _DEV_ORIGIN}),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )


def create_app() -> FastAPI:
    """Create the application with production wiring.

    Logfire must already be configured (scripts/start_app.py does it).
    Tests swap the container afterwards with ``setup_di``.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Forum API",
        description="Discussions with nested replies, reactions and @mentions",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)
    _add_cors(app_instance, settings)

    setup_di(app_instance, create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(discussions.router)
    return app_instance


app = create_app()
