from .fetcher import FetchError, QuizFetcher, build_quiz_url
from .models import AnswerResult, FetchOutcome, Question, QuizOptions, QuizSummary
from .options import QuizAborted, prompt_options
from .runner import QuizRunner, score_answer, summarize
from .shuffle import build_choices, shuffle_in_place

__all__ = [
    "AnswerResult",
    "FetchError",
    "FetchOutcome",
    "Question",
    "QuizAborted",
    "QuizFetcher",
    "QuizOptions",
    "QuizRunner",
    "QuizSummary",
    "build_choices",
    "build_quiz_url",
    "prompt_options",
    "score_answer",
    "shuffle_in_place",
    "summarize",
]
