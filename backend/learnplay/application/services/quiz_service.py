"""Quiz parsing and answer scoring.

The model is asked for strict JSON, but replies often wrap it in markdown
fences or prose. ``parse_quiz`` takes the outermost ``{...}`` span and
ignores anything around it.
"""

import json
import logging
from typing import Any

from learnplay.domain.entities import Quiz, QuizQuestion

logger = logging.getLogger(__name__)


def evaluate_answer(question: QuizQuestion, user_answer: str | None) -> bool:
    """Score a single answer against its question."""
    if not user_answer:
        return False

    if question.type == "mcq":
        return user_answer.strip().upper() == str(question.answer or "").strip().upper()

    if question.type == "short":
        return user_answer.strip().lower() == str(question.answer or "").strip().lower()

    if question.type == "explain":
        text = user_answer.lower()
        return any(str(keyword).lower() in text for keyword in question.rubric)

    return False


def parse_quiz(raw_text: str) -> Quiz | None:
    """Extract a quiz from raw model output, or None if there is none."""
    start = raw_text.find("{")
    end = raw_text.rfind("}")
    if start == -1 or end <= start:
        return None

    try:
        data = json.loads(raw_text[start : end + 1])
    except json.JSONDecodeError:
        logger.debug("Model output is not valid quiz JSON")
        return None

    raw_questions = data.get("questions") if isinstance(data, dict) else None
    if not isinstance(raw_questions, list):
        return None

    questions = [
        q for q in (_to_question(item) for item in raw_questions) if q is not None
    ]
    if not questions:
        return None
    return Quiz(questions=questions)


def _to_question(item: Any) -> QuizQuestion | None:
    if not isinstance(item, dict):
        return None

    text = item.get("q") or item.get("question")
    if not text:
        return None

    answer = item.get("answer", item.get("correct_answer"))
    options = item.get("options")
    rubric = item.get("rubric")

    return QuizQuestion(
        type=str(item.get("type", "")).lower(),
        q=str(text),
        options=[str(o) for o in options] if isinstance(options, list) else [],
        answer=str(answer) if answer is not None else None,
        rubric=[str(k) for k in rubric] if isinstance(rubric, list) else [],
    )
