"""Interactive collection of the quiz parameters."""

from __future__ import annotations

import re
from typing import Callable, Optional, Sequence

from rich.console import Console

from trivia_quiz.config.schema import CategoryOption
from trivia_quiz.quiz.models import DIFFICULTIES, QuizOptions

Ask = Callable[[str], str]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


class QuizAborted(RuntimeError):
    """Raised when input ends before the quiz options are complete."""


def parse_int(text: str) -> Optional[int]:
    """Parse the leading integer of `text`, or return None when there is none."""
    match = _LEADING_INT.match(text or "")
    if not match:
        return None
    return int(match.group(1))


def _read(ask: Ask, prompt: str) -> str:
    try:
        return ask(prompt)
    except EOFError as exc:
        raise QuizAborted("Input ended before the quiz options were collected.") from exc


def prompt_question_count(ask: Ask, console: Console, max_questions: int = 50) -> int:
    while True:
        value = parse_int(_read(ask, "Enter the number of questions: "))
        if value is not None and 1 <= value <= max_questions:
            return value
        console.print(f"Please enter a whole number between 1 and {max_questions}.", markup=False)


def prompt_difficulty(ask: Ask, console: Console) -> str:
    choices = ", ".join(DIFFICULTIES)
    while True:
        value = _read(ask, f"Enter the difficulty ({choices}): ").strip().lower()
        if value in DIFFICULTIES:
            return value
        console.print(f"Difficulty must be one of: {choices}.", markup=False)


def prompt_category(ask: Ask, console: Console, categories: Sequence[CategoryOption]) -> int:
    while True:
        console.print("Choose a category:", markup=False)
        for option in categories:
            console.print(f"{option.id}. {option.name}", markup=False, highlight=False, soft_wrap=True)
        value = parse_int(_read(ask, ""))
        if value is not None:
            return value
        console.print("Category must be a number from the list above.", markup=False)


def prompt_options(
    ask: Ask,
    console: Console,
    categories: Sequence[CategoryOption],
    *,
    max_questions: int = 50,
    number_of_questions: Optional[int] = None,
    difficulty: Optional[str] = None,
    category: Optional[int] = None,
) -> QuizOptions:
    """
    Ask for question count, difficulty and category, in that order.

    Values passed in are used as-is and their prompt is skipped. Invalid answers are
    reported and asked again rather than forwarded to the trivia API.
    """
    if number_of_questions is None:
        number_of_questions = prompt_question_count(ask, console, max_questions)
    if difficulty is None:
        difficulty = prompt_difficulty(ask, console)
    if category is None:
        category = prompt_category(ask, console, categories)
    return QuizOptions(
        number_of_questions=number_of_questions,
        difficulty=difficulty,
        category=category,
    )
