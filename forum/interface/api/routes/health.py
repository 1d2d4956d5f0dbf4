"""Health check route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from forum.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    environment: str
    git_sha: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Liveness probe. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        git_sha=settings.git_sha,
        timestamp=datetime.now(),
    )
