"""
Command-line trivia quiz.

Fetches multiple-choice questions from the Open Trivia Database, asks them one at a
time in the terminal, and reports the final score.
"""

from .config.loader import load_settings
from .system import QuizSystem

__all__ = ["QuizSystem", "load_settings"]
