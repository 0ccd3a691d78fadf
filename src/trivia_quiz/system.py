from __future__ import annotations

import random
from pathlib import Path
from typing import Callable, Optional

import requests
from rich.console import Console

from trivia_quiz.config import Settings, load_settings
from trivia_quiz.quiz.fetcher import QuizFetcher
from trivia_quiz.quiz.models import FetchOutcome, QuizOptions, QuizSummary
from trivia_quiz.quiz.options import prompt_options
from trivia_quiz.quiz.runner import QuizRunner
from trivia_quiz.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


class QuizSystem:
    """
    Facade that wires settings, logging, the question fetcher and the runner together.

    One `play()` call is one interactive session: collect options, fetch once, ask every
    question, print the score. The CLI and tests both go through this class; tests swap in
    a fake HTTP session, an input callable and a recording console.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        console: Optional[Console] = None,
        ask: Optional[Callable[[str], str]] = None,
        session: Optional[requests.Session] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings
        configure_logging(settings.logging.level, settings.logging.use_json)

        self.console = console or Console()
        self.ask = ask or self.console.input
        self.fetcher = QuizFetcher(settings.api, session=session)
        self.runner = QuizRunner(console=self.console, ask=self.ask, rng=rng)

    @classmethod
    def from_config(
        cls,
        config_path: str | Path | None = None,
        *,
        log_level: Optional[str] = None,
        **kwargs,
    ) -> "QuizSystem":
        """Load settings from YAML (plus env overrides) and build the system."""
        settings = load_settings(config_path)
        if log_level:
            settings.logging.level = log_level
        return cls(settings, **kwargs)

    def collect_options(
        self,
        *,
        number_of_questions: Optional[int] = None,
        difficulty: Optional[str] = None,
        category: Optional[int] = None,
    ) -> QuizOptions:
        return prompt_options(
            self.ask,
            self.console,
            self.settings.quiz.categories,
            max_questions=self.settings.quiz.max_questions,
            number_of_questions=number_of_questions,
            difficulty=difficulty,
            category=category,
        )

    def fetch_questions(self, options: QuizOptions) -> FetchOutcome:
        outcome = self.fetcher.fetch(options)
        if not outcome.ok:
            self.console.print(
                f"Failed to fetch quiz questions: {outcome.error}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
        return outcome

    def play(self, options: Optional[QuizOptions] = None) -> QuizSummary:
        """Run one full session and return its summary."""
        if options is None:
            options = self.collect_options()
        logger.debug(
            "quiz_options",
            amount=options.number_of_questions,
            difficulty=options.difficulty,
            category=options.category,
        )
        outcome = self.fetch_questions(options)
        return self.runner.run(outcome.questions)

    def close(self) -> None:
        self.fetcher.close()

    def __enter__(self) -> "QuizSystem":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
