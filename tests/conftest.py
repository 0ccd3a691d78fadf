"""Shared fakes for quiz tests: HTTP session, scripted input and a recording console."""

from __future__ import annotations

import io
import random
from typing import Any, Iterable, List, Optional

import pytest
from rich.console import Console

from trivia_quiz.config.schema import Settings
from trivia_quiz.quiz.models import Question


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, json_error: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    def __init__(self, response: Optional[FakeResponse] = None, exc: Optional[Exception] = None):
        self.response = response
        self.exc = exc
        self.calls: List[tuple] = []
        self.closed = False

    def get(self, url: str, timeout: Optional[float] = None) -> FakeResponse:
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        self.closed = True


class ScriptedInput:
    """Callable standing in for `input()`; raises EOFError once the script runs out."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class IdentityRandom(random.Random):
    """Random source whose Fisher-Yates swaps are all no-ops, keeping input order."""

    def randrange(self, start, stop=None, step=1):
        return (start if stop is None else stop) - 1


def api_payload(*questions: dict, response_code: int = 0) -> dict:
    return {"response_code": response_code, "results": list(questions)}


def api_question(text: str, correct: str, incorrect: List[str]) -> dict:
    return {
        "type": "multiple",
        "difficulty": "easy",
        "category": "General Knowledge",
        "question": text,
        "correct_answer": correct,
        "incorrect_answers": incorrect,
    }


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    return Console(file=output, width=200, color_system=None)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def sample_questions():
    return [
        Question(
            question="What is the capital of France?",
            correct_answer="Paris",
            incorrect_answers=["Lyon", "Marseille", "Nice"],
        ),
        Question(
            question="How many legs does a spider have?",
            correct_answer="8",
            incorrect_answers=["6", "10", "12"],
        ),
    ]
