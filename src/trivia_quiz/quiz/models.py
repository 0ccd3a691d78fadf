from __future__ import annotations

import html
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DIFFICULTIES = ("easy", "medium", "hard")

AnswerStatus = Literal["correct", "incorrect", "invalid"]


class QuizOptions(BaseModel):
    """Parameters for one quiz request, collected once from the player."""

    model_config = ConfigDict(frozen=True)

    number_of_questions: int = Field(ge=1)
    difficulty: str
    category: int

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value: Any) -> str:
        text = str(value).strip().lower()
        if text not in DIFFICULTIES:
            raise ValueError(f"difficulty must be one of: {', '.join(DIFFICULTIES)}")
        return text


class Question(BaseModel):
    """Single multiple-choice item as served by the trivia API."""

    model_config = ConfigDict(frozen=True)

    question: str
    correct_answer: str
    incorrect_answers: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    difficulty: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Question":
        """Build a question from one `results` entry, decoding the API's HTML entities."""
        incorrect = payload.get("incorrect_answers") or []
        if not isinstance(incorrect, list):
            raise ValueError("incorrect_answers must be a list")
        data = {
            "question": html.unescape(str(payload["question"])),
            "correct_answer": html.unescape(str(payload["correct_answer"])),
            "incorrect_answers": [html.unescape(str(item)) for item in incorrect],
        }
        for key in ("category", "difficulty", "type"):
            if payload.get(key) is not None:
                data[key] = html.unescape(str(payload[key]))
        return cls.model_validate(data)


class FetchOutcome(BaseModel):
    """Result of a fetch: either the questions received or the reason none arrived."""

    ok: bool
    questions: List[Question] = Field(default_factory=list)
    error: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def fetched(cls, questions: List[Question]) -> "FetchOutcome":
        return cls(ok=True, questions=list(questions))

    @classmethod
    def failed(cls, error: str, status_code: Optional[int] = None) -> "FetchOutcome":
        return cls(ok=False, questions=[], error=error, status_code=status_code)


class AnswerResult(BaseModel):
    """Feedback for a single prompted question."""

    index: int
    choices: List[str]
    correct_answer: str
    raw_input: Optional[str] = None
    selected_index: Optional[int] = None
    status: AnswerStatus

    @property
    def is_correct(self) -> bool:
        return self.status == "correct"

    @property
    def selected_choice(self) -> Optional[str]:
        if self.selected_index is None:
            return None
        return self.choices[self.selected_index - 1]


class QuizSummary(BaseModel):
    """Aggregate score for a completed session."""

    total: int
    correct: int
    incorrect: int
    correct_percentage: Optional[float] = None
    incorrect_percentage: Optional[float] = None
    answers: List[AnswerResult] = Field(default_factory=list)

    @property
    def has_questions(self) -> bool:
        return self.total > 0
