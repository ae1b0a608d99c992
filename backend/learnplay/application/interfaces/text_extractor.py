"""Abstract interface (port) for text extraction from uploaded files."""

from abc import ABC, abstractmethod


class TextExtractor(ABC):
    """Port for text extraction — implemented in the infrastructure layer."""

    @abstractmethod
    async def extract(self, data: bytes, mime_type: str, filename: str | None = None) -> str:
        """Extract text content from an in-memory file.

        Raises:
            UnsupportedFileTypeError: If the MIME type is not supported.
        """
        ...

    @abstractmethod
    def supports(self, mime_type: str) -> bool:
        """Check if the extractor supports the given MIME type."""
        ...
