"""Abstract chat provider interface — port for model runtime adapters."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from learnplay.domain.entities import ChatMessage


class ChatProvider(ABC):
    """Port — defines what the application layer needs from a chat backend."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'ollama')."""
        ...

    @property
    @abstractmethod
    def model(self) -> str:
        """The model identifier requests are sent to."""
        ...

    @abstractmethod
    async def stream(self, messages: list[ChatMessage]) -> AsyncIterator[str]:
        """Send a streaming chat request.

        Yields each non-empty NDJSON line from the upstream body, verbatim
        and without its trailing newline.

        Raises:
            UpstreamServiceError: If the provider cannot be reached or
                returns a non-success status.
        """
        ...
