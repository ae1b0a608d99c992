"""Quiz endpoints — extract quiz JSON from model output and score answers."""

from fastapi import APIRouter, HTTPException, status

from learnplay.application.schemas import (
    QuizEvaluateRequest,
    QuizEvaluateResponse,
    QuizParseRequest,
    QuizParseResponse,
    QuizQuestionSchema,
)
from learnplay.application.services.quiz_service import evaluate_answer, parse_quiz
from learnplay.domain.entities import QuizQuestion

router = APIRouter(prefix="/quiz", tags=["Quiz"])

_KNOWN_TYPES = {"mcq", "short", "explain"}


@router.post("/parse", response_model=QuizParseResponse)
async def parse(request: QuizParseRequest) -> QuizParseResponse:
    """Pull the quiz out of a finished model reply."""
    quiz = parse_quiz(request.text)
    questions = [q for q in quiz.questions if q.type in _KNOWN_TYPES] if quiz else []
    if not questions:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="No quiz JSON found in text",
        )
    return QuizParseResponse(
        questions=[QuizQuestionSchema(**q.to_dict()) for q in questions]
    )


@router.post("/evaluate", response_model=QuizEvaluateResponse)
async def evaluate(request: QuizEvaluateRequest) -> QuizEvaluateResponse:
    question = QuizQuestion(**request.question.model_dump())
    return QuizEvaluateResponse(correct=evaluate_answer(question, request.answer))
