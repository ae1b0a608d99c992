"""Fixed-window text chunking with overlap."""

DEFAULT_CHUNK_SIZE = 800
DEFAULT_CHUNK_OVERLAP = 120


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> list[str]:
    """Split text into windows of ``chunk_size`` characters.

    Each window starts ``overlap`` characters before the end of the previous
    one, so context spanning a boundary appears in both chunks. The last
    window may be shorter. Windows that are blank after stripping are
    dropped; kept chunks are returned untrimmed.

    Raises:
        ValueError: If ``chunk_size`` is not positive or ``overlap`` is not
            in ``[0, chunk_size)``.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0 or overlap >= chunk_size:
        raise ValueError(
            f"overlap must be in [0, {chunk_size}), got {overlap}"
        )

    chunks: list[str] = []
    start = 0
    length = len(text)

    while start < length:
        end = min(start + chunk_size, length)
        piece = text[start:end]
        if piece.strip():
            chunks.append(piece)
        if end == length:
            break
        start = max(end - overlap, 0)

    return chunks
