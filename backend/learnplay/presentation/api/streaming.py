"""NDJSON streaming helpers shared by the relay endpoints."""

import json
import logging
from collections.abc import AsyncIterator

from fastapi.responses import StreamingResponse

from learnplay.domain.exceptions import UpstreamServiceError

logger = logging.getLogger(__name__)

NDJSON_MEDIA_TYPE = "application/x-ndjson"


def error_line(message: str) -> str:
    return json.dumps({"error": message}) + "\n"


async def relay_lines(lines: AsyncIterator[str]) -> AsyncIterator[str]:
    """Forward upstream lines, newline-terminated.

    Headers are already sent once the first line goes out, so failures are
    written into the body as a final ``{"error": ...}`` line.
    """
    try:
        async for line in lines:
            yield line + "\n"
    except UpstreamServiceError as e:
        logger.warning("Upstream failure mid-stream: %s", e)
        yield error_line(e.message)
    except Exception as e:
        logger.exception("Unexpected error while streaming")
        yield error_line(str(e) or "server error")


def ndjson_response(lines: AsyncIterator[str]) -> StreamingResponse:
    return StreamingResponse(
        relay_lines(lines),
        media_type=NDJSON_MEDIA_TYPE,
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",
        },
    )
