from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional dependency
    load_dotenv = None

from trivia_quiz.quiz.models import DIFFICULTIES
from trivia_quiz.quiz.options import QuizAborted
from trivia_quiz.system import QuizSystem

app = typer.Typer(help="Multiple-choice trivia quiz backed by the Open Trivia Database.")
console = Console()

if load_dotenv:
    try:
        load_dotenv(override=False)
    except AssertionError:
        pass


def _load_system(config: Optional[Path], log_level: Optional[str]) -> QuizSystem:
    """Instantiate `QuizSystem` with optional config path and log level override."""
    return QuizSystem.from_config(config, log_level=log_level, console=console)


@app.command()
def play(
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
    amount: Optional[int] = typer.Option(None, min=1, help="Number of questions; skips the prompt."),
    difficulty: Optional[str] = typer.Option(
        None, help=f"Difficulty ({', '.join(DIFFICULTIES)}); skips the prompt."
    ),
    category: Optional[int] = typer.Option(None, help="Category ID; skips the prompt."),
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level."),
):
    """
    Play one round: choose options, answer each question, see the score.

    Any option not given on the command line is asked for interactively. A failed fetch
    still finishes the round, reporting that there were no questions to score.
    """
    if difficulty is not None and difficulty.strip().lower() not in DIFFICULTIES:
        raise typer.BadParameter(
            "difficulty must be one of: " + ", ".join(DIFFICULTIES), param_hint="--difficulty"
        )

    try:
        system = _load_system(config, log_level)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"Configuration error: {exc}", markup=False)
        raise typer.Exit(code=1) from exc

    with system:
        max_questions = system.settings.quiz.max_questions
        if amount is not None and amount > max_questions:
            raise typer.BadParameter(
                f"at most {max_questions} questions per quiz", param_hint="--amount"
            )
        try:
            options = system.collect_options(
                number_of_questions=amount,
                difficulty=difficulty,
                category=category,
            )
        except (QuizAborted, KeyboardInterrupt) as exc:
            console.print("\nQuiz cancelled.")
            raise typer.Exit(code=130) from exc
        system.play(options)


if __name__ == "__main__":
    app()
