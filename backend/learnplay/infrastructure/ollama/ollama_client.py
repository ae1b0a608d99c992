"""Ollama API client — implements the ChatProvider interface.

Talks to a local Ollama server (``/api/chat``) with httpx and relays its
newline-delimited JSON stream line by line.
"""

import json
import logging
from collections.abc import AsyncIterator

import httpx

from learnplay.application.interfaces.chat_provider import ChatProvider
from learnplay.domain.entities import ChatMessage
from learnplay.domain.exceptions import UpstreamServiceError

logger = logging.getLogger(__name__)


class OllamaChatClient(ChatProvider):
    """Infrastructure adapter — streams chat completions from Ollama."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:11434",
        model: str = "qwen2.5:3b",
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

    def _build_payload(self, messages: list[ChatMessage]) -> dict:
        return {
            "model": self._model,
            "messages": [m.to_dict() for m in messages],
            "stream": True,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def stream(self, messages: list[ChatMessage]) -> AsyncIterator[str]:
        """Stream a chat from Ollama, yielding each non-empty NDJSON line."""
        url = f"{self._base_url}/api/chat"
        payload = self._build_payload(messages)

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            async with client.stream("POST", url, json=payload) as response:
                if response.status_code != 200:
                    body = await response.aread()
                    self._raise_provider_error(response.status_code, body)

                async for line in response.aiter_lines():
                    if line.strip():
                        yield line

        except httpx.HTTPError as e:
            logger.error("Ollama request failed: %s", e)
            raise UpstreamServiceError(
                provider=self.provider_name,
                status_code=503,
                message=f"ollama request failed: {e}",
            ) from e

        finally:
            if should_close:
                await client.aclose()

    def _raise_provider_error(self, status_code: int, body: bytes) -> None:
        """Raise UpstreamServiceError from a non-200 Ollama response body."""
        try:
            message = json.loads(body).get("error") or body.decode()
        except (ValueError, AttributeError):
            message = body.decode(errors="replace")

        logger.error("Ollama chat error %d: %s", status_code, message[:500])
        raise UpstreamServiceError(
            provider=self.provider_name,
            status_code=status_code,
            message=message,
        )
