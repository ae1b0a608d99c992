"""Chat relay endpoints — plain chat and document-grounded teaching."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from learnplay.application.schemas import ChatRelayRequest, TeachRequest
from learnplay.application.services import ChatRelayService
from learnplay.domain.entities import ChatMessage
from learnplay.domain.exceptions import (
    InvalidRequestError,
    NoDocumentError,
    UpstreamServiceError,
)
from learnplay.infrastructure.dependencies import get_chat_relay_service
from learnplay.presentation.api.streaming import ndjson_response

router = APIRouter(tags=["Chat"])


@router.post("/chat")
async def chat(
    request: ChatRelayRequest,
    service: ChatRelayService = Depends(get_chat_relay_service),
) -> StreamingResponse:
    """Relay a conversation to the model and stream its NDJSON output verbatim."""
    messages = [ChatMessage(role=m.role, content=m.content) for m in request.messages]
    return ndjson_response(service.stream_chat(messages))


@router.post("/teach")
async def teach(
    request: TeachRequest,
    service: ChatRelayService = Depends(get_chat_relay_service),
) -> StreamingResponse:
    """Stream a lesson or quiz grounded on the uploaded document.

    Retrieval runs before the response starts, so a missing document or a
    failed query embedding is reported with a proper status code.
    """
    try:
        messages = await service.prepare_grounded(request.query, request.mode)
    except NoDocumentError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except UpstreamServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"[{e.provider}] {e.message}",
        )

    return ndjson_response(service.stream_chat(messages))
