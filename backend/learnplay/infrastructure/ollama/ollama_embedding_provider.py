"""Ollama-based embedding provider — calls the /api/embeddings endpoint.

Uses the same httpx client pattern as OllamaChatClient. One text per request.
"""

import logging
from typing import Any

import httpx

from learnplay.application.interfaces.embedding_provider import EmbeddingProvider
from learnplay.domain.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class OllamaEmbeddingProvider(EmbeddingProvider):
    """Infrastructure adapter — generates embeddings via Ollama."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:11434",
        model: str = "nomic-embed-text",
        timeout: float = 120.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "ollama"

    @property
    def model(self) -> str:
        return self._model

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def embed(self, text: str) -> list[float]:
        url = f"{self._base_url}/api/embeddings"
        payload: dict[str, Any] = {"model": self._model, "prompt": text}

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(url, json=payload)
        except httpx.HTTPError as e:
            raise EmbeddingError(
                provider=self.provider_name,
                status_code=503,
                message=f"embedding request failed: {e}",
            ) from e
        finally:
            if should_close:
                await client.aclose()

        if response.status_code != 200:
            error_text = response.text[:500]
            logger.error("Embedding API error %d: %s", response.status_code, error_text)
            raise EmbeddingError(
                provider=self.provider_name,
                status_code=response.status_code,
                message=error_text,
            )

        try:
            embedding = response.json()["embedding"]
        except (ValueError, KeyError, TypeError) as e:
            raise EmbeddingError(
                provider=self.provider_name,
                status_code=502,
                message="embedding response missing 'embedding' field",
            ) from e

        if not embedding:
            raise EmbeddingError(
                provider=self.provider_name,
                status_code=502,
                message=f"empty embedding returned by model '{self._model}'",
            )
        return [float(x) for x in embedding]
