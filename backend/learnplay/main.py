"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learnplay.config import get_settings
from learnplay.infrastructure.dependencies import get_document_store
from learnplay.infrastructure.logging.log_config import setup_logging
from learnplay.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, drop the document on shutdown."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "LearnPlay relay → %s (chat=%s, embeddings=%s)",
        settings.ollama_url,
        settings.ollama_model,
        settings.embedding_model,
    )

    yield

    await get_document_store().clear()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "learnplay.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
    )
