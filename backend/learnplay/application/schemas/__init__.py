from .chat import ChatMessageSchema, ChatRelayRequest, HealthResponse, TeachRequest
from .documents import ClearResponse, DocumentStatusResponse, UploadResponse
from .quiz import (
    QuizEvaluateRequest,
    QuizEvaluateResponse,
    QuizParseRequest,
    QuizParseResponse,
    QuizQuestionSchema,
)

__all__ = [
    "ChatMessageSchema",
    "ChatRelayRequest",
    "HealthResponse",
    "TeachRequest",
    "ClearResponse",
    "DocumentStatusResponse",
    "UploadResponse",
    "QuizEvaluateRequest",
    "QuizEvaluateResponse",
    "QuizParseRequest",
    "QuizParseResponse",
    "QuizQuestionSchema",
]
