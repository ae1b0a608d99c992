"""Embedding service — turns batches of texts into embedding vectors.

Each text is sent to the EmbeddingProvider as its own request. Requests run
with at most ``max_concurrency`` in flight; the default of 1 keeps them
strictly sequential.
"""

import asyncio
import logging
import time

from learnplay.application.interfaces.embedding_provider import EmbeddingProvider
from learnplay.domain.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class EmbeddingService:
    """Application service for batch embedding acquisition."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        *,
        max_concurrency: int = 1,
    ):
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")
        self._provider = embedding_provider
        self._max_concurrency = max_concurrency

    @property
    def model(self) -> str:
        return self._provider.model

    async def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Embed every text, returning vectors in input order.

        The batch aborts on the first failure; no partial result is returned.

        Raises:
            EmbeddingError: If any single embedding call fails.
        """
        if not texts:
            return []

        start = time.monotonic()

        if self._max_concurrency == 1:
            results = [await self._embed_one(text) for text in texts]
        else:
            results = await self._embed_concurrently(texts)

        duration_ms = int((time.monotonic() - start) * 1000)
        logger.info(
            "Embedded %d texts in %dms (model=%s, concurrency=%d)",
            len(results),
            duration_ms,
            self._provider.model,
            self._max_concurrency,
        )
        return results

    async def embed_query(self, query: str) -> list[float]:
        """Embed a single search query."""
        return await self._embed_one(query)

    async def _embed_concurrently(self, texts: list[str]) -> list[list[float]]:
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(text: str) -> list[float]:
            async with semaphore:
                return await self._embed_one(text)

        tasks = [asyncio.create_task(bounded(text)) for text in texts]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _embed_one(self, text: str) -> list[float]:
        try:
            return await self._provider.embed(text)
        except EmbeddingError:
            raise
        except Exception as e:
            logger.error("Embedding call failed: %s", e)
            raise EmbeddingError(
                provider=self._provider.provider_name,
                status_code=502,
                message=str(e),
            ) from e
