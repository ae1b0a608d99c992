"""Pydantic schemas for quiz parsing and answer evaluation."""

from typing import Literal

from pydantic import BaseModel, Field


class QuizQuestionSchema(BaseModel):
    """One quiz question in the shape the model is asked to produce."""

    type: Literal["mcq", "short", "explain"]
    q: str
    options: list[str] = Field(default_factory=list)
    answer: str | None = None
    rubric: list[str] = Field(default_factory=list)


class QuizParseRequest(BaseModel):
    text: str = Field(..., description="Raw model output that may contain quiz JSON")


class QuizParseResponse(BaseModel):
    questions: list[QuizQuestionSchema]


class QuizEvaluateRequest(BaseModel):
    question: QuizQuestionSchema
    answer: str


class QuizEvaluateResponse(BaseModel):
    correct: bool
