"""Abstract interface (port) for embedding generation."""

from abc import ABC, abstractmethod


class EmbeddingProvider(ABC):
    """Port for generating text embeddings — implemented in the infrastructure layer."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'ollama')."""
        ...

    @property
    @abstractmethod
    def model(self) -> str:
        """Identifier of the embedding model."""
        ...

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """Generate the embedding vector for a single text.

        Raises:
            EmbeddingError: If the upstream call does not succeed.
        """
        ...
