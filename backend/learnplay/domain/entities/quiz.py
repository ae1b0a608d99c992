"""Domain entities for generated quizzes."""

from dataclasses import dataclass, field


@dataclass
class QuizQuestion:
    """A single quiz question as produced by the model.

    - type="mcq": ``options`` holds 4 choices, ``answer`` is a letter
    - type="short": ``answer`` is the exact expected string
    - type="explain": ``rubric`` lists keywords a good answer mentions
    """

    type: str  # "mcq" | "short" | "explain"
    q: str
    options: list[str] = field(default_factory=list)
    answer: str | None = None
    rubric: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        data: dict = {"type": self.type, "q": self.q}
        if self.type == "mcq":
            data["options"] = list(self.options)
        if self.answer is not None:
            data["answer"] = self.answer
        if self.type == "explain":
            data["rubric"] = list(self.rubric)
        return data


@dataclass
class Quiz:
    """An ordered list of quiz questions."""

    questions: list[QuizQuestion] = field(default_factory=list)
