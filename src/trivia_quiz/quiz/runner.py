from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence

from rich.console import Console

from trivia_quiz.quiz.models import AnswerResult, Question, QuizSummary
from trivia_quiz.quiz.options import parse_int
from trivia_quiz.quiz.shuffle import build_choices

logger = logging.getLogger(__name__)

NO_QUESTIONS_MESSAGE = "No questions to score."


def score_answer(
    choices: Sequence[str],
    correct_answer: str,
    raw_input: Optional[str],
    index: int = 1,
) -> AnswerResult:
    """Grade one line of input against the displayed, 1-based choice list."""
    selected = parse_int(raw_input) if raw_input is not None else None
    if selected is None or not 1 <= selected <= len(choices):
        status = "invalid"
        selected = None
    elif choices[selected - 1] == correct_answer:
        status = "correct"
    else:
        status = "incorrect"
    return AnswerResult(
        index=index,
        choices=list(choices),
        correct_answer=correct_answer,
        raw_input=raw_input,
        selected_index=selected,
        status=status,
    )


def summarize(answers: Sequence[AnswerResult], total: Optional[int] = None) -> QuizSummary:
    """
    Tally answers into a summary.

    `total` is the number of questions fetched, which may exceed the answers given.
    With zero questions the percentages stay None instead of dividing by zero.
    """
    total = len(answers) if total is None else total
    correct = sum(1 for answer in answers if answer.is_correct)
    incorrect = len(answers) - correct
    correct_pct = incorrect_pct = None
    if total:
        correct_pct = correct / total * 100
        incorrect_pct = incorrect / total * 100
    return QuizSummary(
        total=total,
        correct=correct,
        incorrect=incorrect,
        correct_percentage=correct_pct,
        incorrect_percentage=incorrect_pct,
        answers=list(answers),
    )


def format_percentage(value: float) -> str:
    return f"{round(value, 2):g}%"


def format_summary(summary: QuizSummary) -> str:
    if not summary.has_questions:
        return NO_QUESTIONS_MESSAGE
    return (
        f"Quiz completed. Your score: {summary.correct}/{summary.total} "
        f"({format_percentage(summary.correct_percentage)} correct, "
        f"{format_percentage(summary.incorrect_percentage)} incorrect)"
    )


class QuizRunner:
    """Present questions one at a time, read a numbered choice for each, and keep score."""

    def __init__(
        self,
        console: Optional[Console] = None,
        ask: Optional[Callable[[str], str]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.console = console or Console()
        self.ask = ask or self.console.input
        self.rng = rng

    def run(self, questions: Sequence[Question]) -> QuizSummary:
        answers: List[AnswerResult] = []
        input_closed = False
        for index, question in enumerate(questions, start=1):
            choices = build_choices(question, self.rng)
            if input_closed:
                answers.append(score_answer(choices, question.correct_answer, None, index))
                continue

            self._show_question(index, question, choices)
            try:
                raw = self.ask("Your Answer: ")
            except EOFError:
                logger.info("Input closed at question %d; remaining questions count as invalid.", index)
                input_closed = True
                raw = None
                self.console.print()

            result = score_answer(choices, question.correct_answer, raw, index)
            self._show_feedback(result)
            answers.append(result)

        summary = summarize(answers, total=len(questions))
        logger.debug(
            "Quiz finished: total=%d correct=%d incorrect=%d",
            summary.total,
            summary.correct,
            summary.incorrect,
        )
        self._say(format_summary(summary))
        return summary

    def _show_question(self, index: int, question: Question, choices: Sequence[str]) -> None:
        self._say(f"Question {index}: {question.question}")
        for position, choice in enumerate(choices, start=1):
            self._say(f"{position}. {choice}")

    def _show_feedback(self, result: AnswerResult) -> None:
        if result.status == "correct":
            message = "Correct!"
        elif result.status == "incorrect":
            message = f"Incorrect. The correct answer is: {result.correct_answer}"
        else:
            message = "Invalid choice. Skipping question."
        self._say(message + "\n")

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
