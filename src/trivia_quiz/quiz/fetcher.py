from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests
from pydantic import ValidationError

from trivia_quiz.config.schema import ApiConfig
from trivia_quiz.quiz.models import FetchOutcome, Question, QuizOptions
from trivia_quiz.utils.logging import get_logger

logger = get_logger(__name__)

# Open Trivia DB `response_code` values.
RESPONSE_CODES = {
    0: "Success",
    1: "No results: the API does not have enough questions for the query",
    2: "Invalid parameter: the request contains an invalid argument",
    3: "Token not found: the session token does not exist",
    4: "Token empty: the session token has returned all possible questions",
    5: "Rate limit: too many requests, wait before retrying",
}


class FetchError(RuntimeError):
    """Raised when the trivia API does not return a usable response."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


def build_quiz_url(base_url: str, options: QuizOptions, question_type: str = "multiple") -> str:
    """Embed the quiz options in the request URL."""
    query = urlencode(
        [
            ("amount", options.number_of_questions),
            ("category", options.category),
            ("difficulty", options.difficulty),
            ("type", question_type),
        ]
    )
    return f"{base_url}?{query}"


def parse_questions(payload: Any) -> List[Question]:
    """Turn the `results` array into questions, skipping entries without the expected shape."""
    if not isinstance(payload, dict):
        return []
    results = payload.get("results")
    if not isinstance(results, list):
        return []

    questions: List[Question] = []
    for position, item in enumerate(results):
        if not isinstance(item, dict):
            logger.warning("skipping_question", position=position, reason="not an object")
            continue
        try:
            questions.append(Question.from_api(item))
        except (KeyError, ValueError, ValidationError) as exc:
            logger.warning("skipping_question", position=position, reason=str(exc))
    return questions


class QuizFetcher:
    """Retrieve multiple-choice questions from the trivia API with a single GET."""

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._owns_session = session is None
        self.session = session or requests.Session()

    def fetch(self, options: QuizOptions) -> FetchOutcome:
        """
        Request `options.number_of_questions` questions and report what came back.

        HTTP errors, transport failures and unreadable bodies never escape: they are logged
        and returned as a failed outcome carrying zero questions, so the caller decides how
        to present an empty quiz.
        """
        url = build_quiz_url(self.config.base_url, options, self.config.question_type)
        logger.info("fetching_questions", url=url)
        try:
            payload = self._get_json(url)
        except FetchError as exc:
            logger.error("fetch_failed", url=url, status_code=exc.status_code, error=str(exc))
            return FetchOutcome.failed(str(exc), status_code=exc.status_code)
        except requests.RequestException as exc:
            logger.error("fetch_failed", url=url, error=str(exc))
            return FetchOutcome.failed(str(exc))

        if isinstance(payload, dict):
            code = payload.get("response_code", 0)
            if code != 0:
                reason = RESPONSE_CODES.get(code, f"Unknown response code {code}")
                logger.warning("api_response_code", url=url, response_code=code, reason=reason)
                return FetchOutcome.failed(reason)

        questions = parse_questions(payload)
        logger.info("fetched_questions", count=len(questions))
        return FetchOutcome.fetched(questions)

    def _get_json(self, url: str) -> Dict[str, Any]:
        response = self.session.get(url, timeout=self.config.timeout_seconds)
        if not response.ok:
            raise FetchError(
                f"Trivia API responded with status {response.status_code}",
                status_code=response.status_code,
                url=url,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise FetchError("Trivia API returned a body that is not JSON.", url=url) from exc

    def close(self) -> None:
        if self._owns_session:
            self.session.close()
