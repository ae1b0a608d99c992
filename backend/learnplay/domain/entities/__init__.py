from .chat_message import ChatMessage
from .document import DocumentSnapshot, RetrievalResult, ScoredChunk
from .quiz import Quiz, QuizQuestion

__all__ = [
    "ChatMessage",
    "DocumentSnapshot",
    "RetrievalResult",
    "ScoredChunk",
    "Quiz",
    "QuizQuestion",
]
