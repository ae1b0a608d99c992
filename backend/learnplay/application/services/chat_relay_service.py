"""Chat relay — streams model output for plain and document-grounded chats."""

import logging
import time
from collections.abc import AsyncIterator

from learnplay.application.interfaces.chat_provider import ChatProvider
from learnplay.application.services.prompt_builder import build_prompt
from learnplay.application.services.retrieval_service import RetrievalService
from learnplay.domain.entities import ChatMessage

logger = logging.getLogger(__name__)


class ChatRelayService:
    """Application service — forwards chats to the provider line by line.

    Upstream NDJSON lines are passed through unmodified; this service never
    parses or buffers them beyond what the provider needs to split lines.
    """

    def __init__(self, provider: ChatProvider, retrieval_service: RetrievalService):
        self._provider = provider
        self._retrieval = retrieval_service

    async def stream_chat(self, messages: list[ChatMessage]) -> AsyncIterator[str]:
        """Relay a conversation to the provider and yield its output lines."""
        start = time.monotonic()
        line_count = 0
        try:
            async for line in self._provider.stream(messages):
                line_count += 1
                yield line
        finally:
            duration_ms = int((time.monotonic() - start) * 1000)
            logger.info(
                "Relayed %d lines from %s in %dms (model=%s)",
                line_count,
                self._provider.provider_name,
                duration_ms,
                self._provider.model,
            )

    async def prepare_grounded(self, query: str, mode: str) -> list[ChatMessage]:
        """Retrieve context for ``query`` and assemble the prompt for ``mode``.

        Runs before any streaming so NoDocumentError and EmbeddingError reach
        the caller while a proper error status can still be sent.
        """
        result = await self._retrieval.retrieve(query)
        logger.info(
            "Grounding %s prompt on %d chunks (document version %d)",
            mode,
            len(result.ranked),
            result.document_version,
        )
        return build_prompt(query, result.context, mode)
