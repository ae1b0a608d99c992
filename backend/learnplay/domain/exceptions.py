"""Domain-specific exceptions — framework-independent."""


class InvalidRequestError(Exception):
    """Raised when caller input is missing or malformed."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnsupportedFileTypeError(InvalidRequestError):
    """Raised when an uploaded file has a MIME type we cannot extract."""

    def __init__(self, mime_type: str, filename: str | None = None):
        self.mime_type = mime_type
        self.filename = filename
        label = f" ({filename})" if filename else ""
        super().__init__(f"Unsupported file type: {mime_type}{label}")


class NoDocumentError(Exception):
    """Raised when retrieval is requested before any document was uploaded."""

    def __init__(self) -> None:
        super().__init__("No document loaded — upload a file first")


class UpstreamServiceError(Exception):
    """Raised when the model runtime returns an error or cannot be reached.

    Provider-agnostic — the provider name identifies which backend failed.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class EmbeddingError(UpstreamServiceError):
    """Raised when an embedding call does not succeed."""
