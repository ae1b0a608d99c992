"""Domain entities for the in-memory document and its retrieval results."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class DocumentSnapshot:
    """An immutable view of the currently loaded document.

    ``embeddings[i]`` is always the embedding of ``chunks[i]``. A new upload
    never mutates a snapshot; it produces a new one with a higher version.
    """

    chunks: tuple[str, ...]
    embeddings: tuple[tuple[float, ...], ...]
    embedding_model: str
    version: int
    source_name: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if len(self.chunks) != len(self.embeddings):
            raise ValueError(
                f"chunk/embedding count mismatch: {len(self.chunks)} chunks, "
                f"{len(self.embeddings)} embeddings"
            )

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk index paired with its similarity to a query."""

    index: int
    score: float


@dataclass
class RetrievalResult:
    """Outcome of a retrieval query against a document snapshot."""

    query: str
    context: str
    ranked: list[ScoredChunk]
    document_version: int
