"""Prompt templates for document-grounded lessons and quizzes."""

from learnplay.domain.entities import ChatMessage
from learnplay.domain.exceptions import InvalidRequestError

LESSON_MODE = "lesson"
QUIZ_MODE = "quiz"
MODES = (LESSON_MODE, QUIZ_MODE)

# ── Free-form chat ──────────────────────────────────────────────────

TUTOR_SYSTEM_PROMPT = """\
You are LearnPlay, a playful tutor. Teach with (1) analogy first,
(2) concise core idea in 3 bullets, (3) one worked example,
(4) a 1-question check. Keep answers under 180 words unless user asks for more.
Never dump definitions before the analogy. Ask exactly one check question."""

# ── Document-grounded modes ─────────────────────────────────────────

_LESSON_SYSTEM_PROMPT = """\
You are LearnPlay, a playful tutor. Teach ONLY from the document excerpts
below. If the excerpts do not cover the question, say so instead of guessing.
Start with an analogy, then give the core idea in 3 bullets, one worked
example drawn from the excerpts, and end with exactly one check question.

## Document excerpts

{context}"""

_QUIZ_SYSTEM_PROMPT = """\
You are LearnPlay, a quiz generator. Write questions ONLY from the document
excerpts below.

## Document excerpts

{context}

## Response Format (strict JSON, no markdown, no commentary)

{{
  "questions": [
    {{"type": "mcq", "q": "...", "options": ["A) ...", "B) ...", "C) ...", "D) ..."], "answer": "B"}},
    {{"type": "short", "q": "...", "answer": "exact expected answer"}},
    {{"type": "explain", "q": "...", "rubric": ["keyword1", "keyword2", "keyword3"]}}
  ]
}}

Rules:
1. Exactly 3 questions, in the order mcq, short, explain.
2. The mcq has exactly 4 options and its answer is a single letter A-D.
3. The short answer is a few words that can be matched exactly.
4. The explain rubric lists keywords a correct explanation must mention."""

_TEMPLATES = {
    LESSON_MODE: (
        _LESSON_SYSTEM_PROMPT,
        "Teach me about: {query}",
    ),
    QUIZ_MODE: (
        _QUIZ_SYSTEM_PROMPT,
        "Create a quiz about: {query}",
    ),
}


def build_prompt(query: str, context: str, mode: str = LESSON_MODE) -> list[ChatMessage]:
    """Fill the template for ``mode`` with the retrieved context and query.

    Raises:
        InvalidRequestError: If ``mode`` is not a known template.
    """
    template = _TEMPLATES.get(mode)
    if template is None:
        raise InvalidRequestError(f"mode must be one of {', '.join(MODES)}, got '{mode}'")

    system_template, user_template = template
    return [
        ChatMessage(role="system", content=system_template.format(context=context)),
        ChatMessage(role="user", content=user_template.format(query=query)),
    ]
