"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from learnplay.application.schemas import HealthResponse
from learnplay.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Reports liveness and the configured chat model."""
    return HealthResponse(ok=True, model=get_settings().ollama_model)
