"""In-memory document session — one document at a time, replaced wholesale.

Each upload produces a new immutable DocumentSnapshot. Readers take the
current snapshot once and work on it, so an upload that lands mid-query
cannot hand them a chunk list from one document and embeddings from another.
"""

import asyncio
import logging
from collections.abc import Sequence

from learnplay.domain.entities import DocumentSnapshot

logger = logging.getLogger(__name__)


class DocumentStore:
    """Owns the currently loaded document and its version counter."""

    def __init__(self) -> None:
        self._current: DocumentSnapshot | None = None
        self._version = 0
        self._lock = asyncio.Lock()

    def current(self) -> DocumentSnapshot | None:
        """Return the loaded snapshot, or None when nothing is loaded."""
        return self._current

    @property
    def version(self) -> int:
        return self._version

    async def replace(
        self,
        chunks: Sequence[str],
        embeddings: Sequence[Sequence[float]],
        *,
        embedding_model: str,
        source_name: str | None = None,
    ) -> DocumentSnapshot:
        """Swap in a new document built from parallel chunk/embedding lists."""
        async with self._lock:
            snapshot = DocumentSnapshot(
                chunks=tuple(chunks),
                embeddings=tuple(tuple(e) for e in embeddings),
                embedding_model=embedding_model,
                version=self._version + 1,
                source_name=source_name,
            )
            self._version = snapshot.version
            self._current = snapshot

        logger.info(
            "Loaded document %r: %d chunks (version=%d)",
            source_name,
            snapshot.chunk_count,
            snapshot.version,
        )
        return snapshot

    async def clear(self) -> None:
        """Drop the loaded document."""
        async with self._lock:
            self._current = None
            self._version += 1
        logger.info("Cleared document store (version=%d)", self._version)
